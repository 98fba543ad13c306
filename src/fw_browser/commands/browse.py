"""Interactive browse command: edit filters and page through results."""

from __future__ import annotations


from rich.console import Console
from rich.prompt import Prompt

from fw_browser.browser import FirmwareBrowser
from fw_browser.client.errors import error_handler
from fw_browser.commands._common import (
    PlatformOpt,
    ProductOpt,
    TimeoutOpt,
    load_settings,
    make_service,
)
from fw_browser.models.filters import FilterState, SortDirection
from fw_browser.output.tables import FIRMWARE_COLUMNS, firmware_row, make_table
from fw_browser.service.query import parse_sort

console = Console()

HELP = (
    "[dim]Commands: product <name>, platform <code>, channel <name>, "
    "search <text>, sort <field>, asc, desc, clear, next, prev, quit[/]"
)

_FIELDS = {"product", "platform", "channel", "search"}


def apply_command(browser: FirmwareBrowser, line: str) -> bool:
    """Apply one prompt line to the browser. Returns False to stop."""
    verb, _, arg = line.strip().partition(" ")
    verb = verb.lower()
    arg = arg.strip()
    if verb in ("q", "quit", "exit"):
        return False
    if verb in _FIELDS:
        browser.update(**{verb: arg or ("" if verb == "search" else None)})
    elif verb == "sort" and arg:
        field, descending = parse_sort(arg)
        direction = SortDirection.DESC if descending else SortDirection.ASC
        browser.update(sort_field=field, sort_direction=direction)
    elif verb in ("asc", "desc"):
        browser.update(sort_direction=SortDirection(verb))
    elif verb == "clear":
        browser.update(product=None, platform=None, channel=None, search="")
    elif verb in ("n", "next"):
        browser.next_page()
    elif verb in ("p", "prev"):
        browser.prev_page()
    else:
        console.print(HELP)
    return True


def _render(browser: FirmwareBrowser) -> None:
    state = browser.state
    if browser.error is not None:
        console.print(f"[bold red]Error:[/] {browser.error}")
        return
    response = browser.result
    if response is None:
        return
    active = ", ".join(
        f"{name}={getattr(state, name)}"
        for name in ("product", "platform", "channel", "search")
        if getattr(state, name)
    )
    caption = f"sort {state.sort}, offset {state.offset}"
    if response.page is not None:
        caption += f", {response.page.total_elements} total"
    console.print(make_table(
        f"Firmware ({active})" if active else "Firmware",
        FIRMWARE_COLUMNS,
        [firmware_row(item) for item in response.items],
        caption=caption,
    ))


@error_handler
def browse(
    product: ProductOpt = None,
    platform: PlatformOpt = None,
    timeout: TimeoutOpt = None,
) -> None:
    """Interactively filter and page through the catalog."""
    settings = load_settings(timeout=timeout)
    state = FilterState(product=product, platform=platform)
    if settings.default_sort:
        field, descending = parse_sort(settings.default_sort)
        state = state.model_copy(update={
            "sort_field": field,
            "sort_direction": SortDirection.DESC if descending else SortDirection.ASC,
        })
    with make_service(settings) as service:
        options = service.get_initial_filter_values()
        if options.products:
            console.print(f"[dim]{len(options.products)} products, "
                          f"platforms: {', '.join(options.platforms)}[/]")
        browser = FirmwareBrowser(
            service,
            page_size=settings.page_size,
            debounce_seconds=settings.debounce_seconds,
            state=state,
        )
        console.print(HELP)
        try:
            browser.refresh()
            while True:
                _render(browser)
                line = Prompt.ask("[bold]filter[/]", default="quit")
                if not apply_command(browser, line):
                    break
                browser.wait(timeout=settings.timeout + settings.debounce_seconds)
        finally:
            browser.close()

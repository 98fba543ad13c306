"""Firmware commands: list, latest, show, url, download, filters, platforms."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from fw_browser.client.errors import ChecksumMismatchError, error_handler
from fw_browser.commands._common import (
    ChannelOpt,
    FormatOpt,
    LimitOpt,
    OffsetOpt,
    PlatformOpt,
    ProductOpt,
    TimeoutOpt,
    load_settings,
    make_service,
)
from fw_browser.models.firmware import FirmwareItem, FirmwareResponse
from fw_browser.output.formatter import output
from fw_browser.output.tables import (
    FIRMWARE_COLUMNS,
    firmware_csv_row,
    firmware_details,
    firmware_row,
)
from fw_browser.service.checksum import verify_checksum
from fw_browser.service.formatting import format_file_size, get_download_url
from fw_browser.service.platforms import PLATFORM_PRODUCTS, products_for_platform
from fw_browser.service.query import FirmwareFilters, sort_expression

console = Console()


def page_caption(
    response: FirmwareResponse, offset: int, count: int | None = None,
) -> str | None:
    """Human summary of the page position, e.g. ``Showing 1-50 of 812``."""
    if count is None:
        count = len(response.items)
    if response.page is None:
        return f"{count} item(s)" if count else None
    page = response.page
    if not count:
        return f"No results (of {page.total_elements})"
    return (
        f"Showing {offset + 1}-{offset + count} of {page.total_elements}"
        f" (page {page.number + 1}/{max(page.total_pages, 1)})"
    )


def render_firmware(
    response: FirmwareResponse,
    fmt: str,
    *,
    title: str,
    offset: int = 0,
    items: list[FirmwareItem] | None = None,
) -> None:
    data: Any = response
    if items is None:
        items = response.items
    else:
        data = items
    rows = [firmware_csv_row(i) if fmt == "csv" else firmware_row(i) for i in items]
    output(
        data,
        fmt,
        columns=FIRMWARE_COLUMNS,
        rows=rows,
        title=title,
        caption=page_caption(response, offset, len(items)),
    )


@error_handler
def list_firmware(
    product: ProductOpt = None,
    platform: PlatformOpt = None,
    channel: ChannelOpt = None,
    version: Annotated[
        str | None, typer.Option("--version", help="Exact version string"),
    ] = None,
    search: Annotated[
        str | None, typer.Option("--search", "-s", help="Substring match on product name"),
    ] = None,
    sort: Annotated[
        str | None,
        typer.Option("--sort", help="Sort field, e.g. created (prefix '-' for descending)"),
    ] = None,
    desc: Annotated[
        bool, typer.Option("--desc", help="Sort descending"),
    ] = False,
    limit: LimitOpt = None,
    offset: OffsetOpt = None,
    fmt: FormatOpt = None,
    timeout: TimeoutOpt = None,
) -> None:
    """List firmware builds matching the given filters."""
    settings = load_settings(timeout=timeout, fmt=fmt)
    sort_expr = settings.default_sort
    if sort:
        sort_expr = sort_expression(sort.lstrip("-"), desc or sort.startswith("-"))
    filters = FirmwareFilters(
        product=product,
        platform=platform,
        channel=channel,
        version=version,
        limit=limit or settings.page_size,
        offset=offset or 0,
        sort=sort_expr,
    )
    with make_service(settings) as service:
        if search:
            response = service.search_firmware(search, filters)
        else:
            response = service.fetch_firmware(filters)
    render_firmware(
        response, settings.default_format, title="Firmware", offset=filters.offset or 0,
    )


@error_handler
def latest(
    product: ProductOpt = None,
    platform: PlatformOpt = None,
    channel: ChannelOpt = None,
    fmt: FormatOpt = None,
    timeout: TimeoutOpt = None,
) -> None:
    """Show the newest build for every product, platform and channel."""
    settings = load_settings(timeout=timeout, fmt=fmt)
    with make_service(settings) as service:
        response = service.fetch_latest_firmware()
    items = [
        i for i in response.items
        if (not product or i.product.lower() == product.lower())
        and (not platform or i.platform.lower() == platform.lower())
        and (not channel or i.channel == channel)
    ]
    items.sort(key=lambda i: (i.product.lower(), i.platform, i.channel))
    render_firmware(response, settings.default_format, title="Latest Firmware", items=items)


@error_handler
def show(
    firmware_id: Annotated[str, typer.Argument(help="Firmware ID")],
    fmt: FormatOpt = None,
    timeout: TimeoutOpt = None,
) -> None:
    """Show details for a single firmware build."""
    settings = load_settings(timeout=timeout, fmt=fmt)
    with make_service(settings) as service:
        item = service.lookup_firmware(firmware_id).unwrap()
    if settings.default_format == "table":
        output(firmware_details(item), "table", kv=True, title=f"{item.product} {item.display_version}")
    else:
        output(item, settings.default_format)


@error_handler
def url(
    firmware_id: Annotated[str, typer.Argument(help="Firmware ID")],
    timeout: TimeoutOpt = None,
) -> None:
    """Print the download URL of a firmware build."""
    settings = load_settings(timeout=timeout)
    with make_service(settings) as service:
        item = service.lookup_firmware(firmware_id).unwrap()
    href = get_download_url(item)
    if not href:
        console.print(f"[red]Firmware '{firmware_id}' has no download link.[/]")
        raise typer.Exit(1)
    typer.echo(href)


@error_handler
def download(
    firmware_id: Annotated[str, typer.Argument(help="Firmware ID")],
    dest: Annotated[
        Path | None,
        typer.Option("--dest", "-o", help="Output file or directory"),
    ] = None,
    no_verify: Annotated[
        bool, typer.Option("--no-verify", help="Skip checksum verification"),
    ] = False,
    timeout: TimeoutOpt = None,
) -> None:
    """Download a firmware image and verify its checksum."""
    settings = load_settings(timeout=timeout)
    with make_service(settings) as service:
        item = service.lookup_firmware(firmware_id).unwrap()
        href = get_download_url(item)
        if not href:
            console.print(f"[red]Firmware '{firmware_id}' has no download link.[/]")
            raise typer.Exit(1)
        filename = href.rstrip("/").rsplit("/", 1)[-1] or f"{firmware_id}.bin"
        if dest is None:
            target = Path(filename)
        elif dest.is_dir():
            target = dest / filename
        else:
            target = dest
        console.print(f"[dim]Downloading {item.product} {item.display_version}...[/]")
        total = service.client.stream_to_file(href, target)
    console.print(f"[green]Saved {format_file_size(total)} to {target}[/]")
    if no_verify:
        return
    try:
        algorithm = verify_checksum(target, item)
    except ChecksumMismatchError:
        target.unlink(missing_ok=True)
        raise
    if algorithm:
        console.print(f"[green]{algorithm} checksum verified.[/]")
    else:
        console.print("[yellow]No checksum published; skipped verification.[/]")


@error_handler
def filters(
    fmt: FormatOpt = None,
    timeout: TimeoutOpt = None,
) -> None:
    """List the products, platforms and channels available for filtering."""
    settings = load_settings(timeout=timeout, fmt=fmt)
    with make_service(settings) as service:
        options = service.get_initial_filter_values()
    if settings.default_format != "table":
        output(options, settings.default_format)
        return
    if not (options.products or options.platforms or options.channels):
        console.print("[yellow]No filter values available.[/]")
        return
    output(
        {
            "Products": ", ".join(options.products),
            "Platforms": ", ".join(options.platforms),
            "Channels": ", ".join(options.channels),
        },
        "table",
        kv=True,
        title="Filter Values",
    )


@error_handler
def platforms(
    platform: Annotated[
        str | None, typer.Argument(help="Platform code"),
    ] = None,
    fmt: FormatOpt = None,
) -> None:
    """Show known platform codes and the products built on them."""
    settings = load_settings(fmt=fmt)
    if platform:
        products = products_for_platform(platform)
        if not products:
            console.print(f"[red]Unknown platform '{platform}'.[/]")
            raise typer.Exit(1)
        mapping = {platform.lower(): products}
    else:
        mapping = PLATFORM_PRODUCTS
    rows = [[code, ", ".join(products)] for code, products in mapping.items()]
    output(mapping, settings.default_format, columns=["Platform", "Products"], rows=rows, title="Platforms")

"""CLI commands for address lookups, district lookups and directory listing."""

import asyncio
from typing import Annotated

import typer

from tn_legislators.lib.directory import Chamber, LegislatorRecord


def _format_legislator(title: str, record: LegislatorRecord) -> str:
    lines = [f"{title}: {record.name} ({record.party}) - District {record.district}"]
    if record.contact_info.phone:
        lines.append(f"  Phone: {record.contact_info.phone}")
    if record.contact_info.email:
        lines.append(f"  Email: {record.contact_info.email}")
    return "\n".join(lines)


def lookup(
    street: Annotated[str, typer.Argument(help="Street address, e.g. '123 Main St'")],
    zip_code: Annotated[str, typer.Argument(help="Tennessee ZIP code (37xxx or 38xxx)")],
    qr: Annotated[bool, typer.Option("--qr", help="Print the QR contact card URL")] = False,  # noqa: FBT002
) -> None:
    """Find the state senator and representative for an address."""
    asyncio.run(_lookup_impl(street, zip_code, qr))


async def _lookup_impl(street: str, zip_code: str, qr: bool) -> None:
    from tn_legislators.api.v1.lookup import NO_LEGISLATORS_MESSAGE, failure_message
    from tn_legislators.core.config import get_settings
    from tn_legislators.services.lookup_service import LookupFailure, find_legislators, geocode_address

    settings = get_settings()
    outcome = await geocode_address(street, zip_code, settings=settings)
    if isinstance(outcome, LookupFailure):
        typer.echo(failure_message(outcome), err=True)
        raise typer.Exit(code=1)

    result = outcome.result
    typer.echo(f"Address: {result.formatted_address or street}")
    typer.echo(f"Location: {result.latitude:.6f}, {result.longitude:.6f}")
    if result.district is not None:
        typer.echo(f"Senate district: {result.district.senate or 'unknown'}")
        typer.echo(f"House district:  {result.district.house or 'unknown'}")

    found = await find_legislators(outcome.address, result, settings=settings)
    if found.match.is_empty:
        typer.echo(NO_LEGISLATORS_MESSAGE, err=True)
        raise typer.Exit(code=1)

    if found.match.senator is not None:
        typer.echo(_format_legislator("Senator", found.match.senator))
    if found.match.representative is not None:
        typer.echo(_format_legislator("Representative", found.match.representative))
    if qr and found.qr_code_url:
        typer.echo(f"QR code: {found.qr_code_url}")


def districts(
    lat: Annotated[float, typer.Option("--lat", help="WGS84 latitude")],
    lng: Annotated[float, typer.Option("--lng", help="WGS84 longitude")],
) -> None:
    """Look up legislative districts for a coordinate pair."""
    asyncio.run(_districts_impl(lat, lng))


async def _districts_impl(lat: float, lng: float) -> None:
    from tn_legislators.core.config import get_settings
    from tn_legislators.services.lookup_service import LookupFailure, build_district_resolver, resolve_districts

    resolver = build_district_resolver(get_settings())
    info = await resolve_districts(resolver, lat, lng)
    if isinstance(info, LookupFailure):
        typer.echo(f"District lookup failed ({info.kind}): {info.detail}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Senate district: {info.senate or 'unknown'}")
    typer.echo(f"House district:  {info.house or 'unknown'}")


def legislators(
    chamber: Annotated[Chamber | None, typer.Option("--chamber", help="senate or house")] = None,
) -> None:
    """List legislators from the directory pages."""
    asyncio.run(_legislators_impl(chamber))


async def _legislators_impl(chamber: Chamber | None) -> None:
    from tn_legislators.core.config import get_settings
    from tn_legislators.services.lookup_service import fetch_legislators

    records = await fetch_legislators(settings=get_settings())
    if chamber is not None:
        records = [r for r in records if r.chamber == chamber]
    for record in records:
        typer.echo(f"{record.id:<12} {record.chamber:<7} {record.district:>3}  {record.name} ({record.party})")
    typer.echo(f"{len(records)} legislators")

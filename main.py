"""
main.py
CLI entry point for the Container Tracking service.

Usage:
  python main.py demo
  python main.py track --container MSKU7750050 [--fallback]
  python main.py track --booking 253916247 --scac MAEU
  python main.py track --bl MAEU253916247
  python main.py api
"""
import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

# Ensure project root is on sys.path when running directly
sys.path.insert(0, str(Path(__file__).parent))


# Demo mode

def run_demo() -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    from tracking.demo import demo_tracking_data

    console = Console()
    console.print("\n[bold blue]═══ CONTAINER TRACKING — DEMO DATA ═══[/bold blue]\n")

    for record in demo_tracking_data():
        vessel = record.vessel
        console.print(f"  [bold]Container:[/bold] {record.reference}")
        if vessel is not None:
            console.print(f"  [bold]Vessel:[/bold]    {vessel.name} (IMO {vessel.imo})")
        console.print(f"  [bold]Status:[/bold]    [green]{record.status.value}[/green]")
        console.print(f"  [bold]ETA:[/bold]       {record.estimated_arrival}")

        table = Table(title=f"Events — {record.reference}", box=box.ROUNDED, show_lines=True)
        table.add_column("Timestamp", style="cyan", width=26)
        table.add_column("Location", width=28)
        table.add_column("Country", width=12)
        table.add_column("Lat / Lng", justify="right", width=20)
        table.add_column("Event", style="yellow", width=20)

        for loc in record.locations:
            coords = loc.location.coordinates
            table.add_row(
                loc.timestamp or "—",
                loc.location.name,
                loc.location.country or "—",
                f"{coords.lat:.4f}, {coords.lng:.4f}" if coords else "—",
                loc.event,
            )
        console.print(table)
        console.print()


# Track mode

async def _track(args: argparse.Namespace) -> int:
    from config.settings import settings
    from monitoring import get_logger
    from tracking.models import TrackingRequest
    from tracking.service import TrackingService

    log = get_logger("cli")
    request = TrackingRequest(
        container_number=args.container,
        booking_number=args.booking,
        bill_of_lading=args.bl,
        scac_code=args.scac,
    )
    service = TrackingService(settings.provider_config())
    if not service.is_configured:
        log.warning("VIZION_API_KEY not set, provider calls will use the placeholder key")

    data = await service.track(request)
    if data is not None:
        records = [data]
    elif args.fallback:
        log.warning("Provider unavailable, printing demo data", identifier=request.identifier)
        records = service.demo_data()
    else:
        log.error("Provider unavailable", identifier=request.identifier)
        return 1

    print(json.dumps([asdict(r) for r in records], indent=2, ensure_ascii=False))
    return 0


def run_track(args: argparse.Namespace) -> int:
    return asyncio.run(_track(args))


# ── API mode ──────────────────────────────────────────────────────────────────

def run_api() -> None:
    import uvicorn
    from config.settings import settings
    from monitoring import start_metrics_server
    start_metrics_server(settings.metrics_port)
    uvicorn.run(
        "api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Container tracking service")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("demo", help="Print the demo tracking records")

    track = sub.add_parser("track", help="Look up one shipment with the provider")
    ident = track.add_mutually_exclusive_group(required=True)
    ident.add_argument("--container", help="Container number")
    ident.add_argument("--booking", help="Booking number")
    ident.add_argument("--bl", help="Bill of lading number")
    track.add_argument("--scac", help="Carrier SCAC code (booking / B/L lookups)")
    track.add_argument("--fallback", action="store_true", help="Print demo data if the provider fails")

    sub.add_parser("api", help="Run the HTTP API")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "demo":
        run_demo()
    elif args.command == "track":
        return run_track(args)
    else:
        run_api()
    return 0


if __name__ == "__main__":
    sys.exit(main())

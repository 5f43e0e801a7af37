"""Module entry point. Enables ``python -m bilifav``."""

import argparse
import asyncio
import json
import sys
from pathlib import Path


async def _with_assembler(coro_factory):
    """Run coro_factory(assembler) with a fresh HTTP client."""
    import httpx

    from bilifav.clients import FavoritesClient, VideoResolver
    from bilifav.services.playlist import FavoritesPageAssembler
    from bilifav.settings import settings

    async with httpx.AsyncClient(follow_redirects=True) as client:
        assembler = FavoritesPageAssembler(
            fetcher=FavoritesClient(client),
            resolver=VideoResolver(client),
            max_concurrency=settings.resolver.max_concurrency,
        )
        return await coro_factory(assembler)


def run_list(media_id: str, page: int, page_size: int) -> None:
    """Print the BV ids of one favorites page as JSON."""
    from bilifav.api.schemas import BvidListResponse, PaginationMeta

    request, listing = asyncio.run(
        _with_assembler(lambda a: a.list_page(media_id, page, page_size))
    )
    body = BvidListResponse(
        media_id=request.media_id,
        bvids=list(listing.bvids),
        pagination=PaginationMeta.from_listing(request, listing),
    )
    print(body.model_dump_json(by_alias=True, indent=2))


def run_page(media_id: str, page: int, page_size: int) -> None:
    """Print one resolved favorites page as JSON."""
    from bilifav.api.schemas import ResolvedPageResponse

    result = asyncio.run(
        _with_assembler(lambda a: a.assemble_page(media_id, page, page_size))
    )
    print(ResolvedPageResponse.from_result(result).model_dump_json(by_alias=True, indent=2))


def run_export(media_id: str, page: int, page_size: int, output: Path | None) -> None:
    """Write one resolved page as an M3U playlist in play order."""
    from bilifav.services.player import PlaylistViewer, write_m3u
    from bilifav.settings import settings

    async def _load(assembler):
        viewer = PlaylistViewer(assembler, media_id, page_size=page_size)
        await viewer.load(page)
        return viewer

    viewer = asyncio.run(_with_assembler(_load))
    order = viewer.play_order()
    if not order:
        print(f"⚠️  No playable video on page {page}")
        sys.exit(1)

    if output is None:
        output = settings.paths.exports_dir / f"favorites_{media_id}_p{page}.m3u"
    write_m3u(order, output)
    print(f"✅ {len(order)} videos written to {output}")


def run_api() -> None:
    """Start the FastAPI server."""
    import uvicorn

    from bilifav.settings import settings

    print("🌐 Starting FastAPI server...")
    uvicorn.run(
        "bilifav.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


def show_config() -> None:
    """Print the active configuration with secrets masked."""
    from bilifav.settings import get_masked_settings

    print(json.dumps(get_masked_settings(), indent=2, default=str))


def _add_page_arguments(parser: argparse.ArgumentParser, default_size: int) -> None:
    parser.add_argument("media_id", help="Favorites playlist ID")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--page-size", type=int, default=default_size)


def main() -> None:
    """Main CLI."""
    parser = argparse.ArgumentParser(
        description="bilifav - Play Bilibili favorites back-to-back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m bilifav api                                   # FastAPI server
  python -m bilifav list 3399027968 --page 2              # BV ids of a page
  python -m bilifav page 3399027968 --page-size 5         # Resolved page
  python -m bilifav export 3399027968 -o fav.m3u          # M3U playlist
  python -m bilifav config                                # Active settings
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    subparsers.add_parser("api", help="FastAPI server")

    list_parser = subparsers.add_parser("list", help="List BV ids of a page")
    _add_page_arguments(list_parser, default_size=20)

    page_parser = subparsers.add_parser("page", help="Resolve a page")
    _add_page_arguments(page_parser, default_size=10)

    export_parser = subparsers.add_parser("export", help="Export a page as M3U")
    _add_page_arguments(export_parser, default_size=10)
    export_parser.add_argument("-o", "--output", type=Path)

    subparsers.add_parser("config", help="Show configuration")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "api":
            run_api()
        elif args.command == "list":
            run_list(args.media_id, args.page, args.page_size)
        elif args.command == "page":
            run_page(args.media_id, args.page, args.page_size)
        elif args.command == "export":
            run_export(args.media_id, args.page, args.page_size, args.output)
        elif args.command == "config":
            show_config()

    except KeyboardInterrupt:
        print("\n⚠️  Interrupted")
        sys.exit(130)
    except Exception as e:
        print(f"\n❌ ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

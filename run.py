"""Unified entry point for the customer and todo services.

This script launches one or both services with uvicorn.  By default
both run concurrently in a single process, each on its own port::

    python run.py            # both services
    python run.py pelanggan  # customer browser only
    python run.py todo       # todo manager only

Host, ports, database paths and the log level are read from
environment variables; see ``crud_services/app/core/config.py``.
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from crud_services.app.core.config import settings
from crud_services.app.main import pelanggan_app, todo_app

SERVICES = {
    "pelanggan": (pelanggan_app, settings.pelanggan_port),
    "todo": (todo_app, settings.todo_port),
}


async def run_service(name: str) -> None:
    """Serve one application until it is stopped."""
    app, port = SERVICES[name]
    logging.info("Server %s jalan di %s:%d", name, settings.host, port)
    config = Config(app=app, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main(names: list[str]) -> None:
    """Run the selected services concurrently."""
    tasks = [asyncio.create_task(run_service(name)) for name in names]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


def parse_args(argv=None) -> list[str]:
    parser = argparse.ArgumentParser(description="Run the customer and/or todo service.")
    parser.add_argument(
        "service",
        nargs="?",
        default="all",
        choices=["all", *SERVICES],
        help="service to start (default: all)",
    )
    args = parser.parse_args(argv)
    return list(SERVICES) if args.service == "all" else [args.service]


if __name__ == "__main__":
    try:
        asyncio.run(main(parse_args()))
    except (KeyboardInterrupt, SystemExit):
        pass

import sys
from collections.abc import Sequence

import uvicorn

from mr_mirror.infrastructure.configuration.cli_arguments import USAGE, load_settings, parse_listen
from mr_mirror.infrastructure.entrypoints.api.app_factory import create_app
from mr_mirror.infrastructure.observability.logger_factory_service import configure_logging
from mr_mirror.infrastructure.observability.tracing_setup import configure_tracing


def main(argv: Sequence[str] | None = None) -> None:
    """Run the webhook server: ``mr-mirror [OPTIONS] branch=downstream ...``."""
    settings = load_settings(argv)
    if settings is None:
        print(USAGE)
        sys.exit(0)

    configure_logging(settings.log_level, settings.logging_file)
    if settings.tracing_enabled:
        configure_tracing()

    host, port = parse_listen(settings.listen)
    print(f"start mr-mirror at {settings.listen}", flush=True)
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
        log_config=None,
        timeout_keep_alive=15,
    )


if __name__ == "__main__":
    main()

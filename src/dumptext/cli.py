from __future__ import annotations

import os
import sys
from typing import NoReturn, Optional, Sequence

from dumptext.core.errors import DumpTextError, HelpRequested
from dumptext.core.interfaces import ExtractorRegistryProtocol, LoggerFactoryProtocol, WalkerProtocol
from dumptext.core.report import RunReport
from dumptext.logging.factory import DefaultLoggerFactory
from dumptext.logging.helpers import get_logger
from dumptext.parsing.parser import _build_parser
from dumptext.parsing.resolver import resolve_config
from dumptext.runtime.runner import PipelineRunner


logger = get_logger('dumptext')


def _configure_logging() -> None:
    """(Re)configure the base logger against the current stdout/stderr."""
    factory: LoggerFactoryProtocol = DefaultLoggerFactory.from_env(stream=sys.stdout, error_stream=sys.stderr)
    global logger
    logger = factory.get_logger('dumptext')


def _program_path(prog: Optional[str]) -> str:
    return prog or (sys.argv[0] if sys.argv and sys.argv[0] else 'dumptext')


class DumpText:
    """Top-level façade for command-style execution."""

    @staticmethod
    def usage(prog: Optional[str] = None) -> str:
        return _build_parser(os.path.basename(_program_path(prog))).format_help()

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        prog: Optional[str] = None,
        registry: Optional[ExtractorRegistryProtocol] = None,
        walker: Optional[WalkerProtocol] = None,
    ) -> RunReport:
        """Run the pipeline for an argv-like sequence and return its report.

        Args:
            argv: Arguments without the program name.
            prog: Invocation path of the program; defaults to `sys.argv[0]`.
            registry: Extraction strategies; defaults to pandoc → lynx → passthrough.
            walker: Candidate collector; defaults to `TreeWalker`.

        Raises:
            DumpTextError: any fatal condition (usage, input, output, extraction method).
        """
        program_path = _program_path(prog)
        ns = _build_parser(os.path.basename(program_path)).parse_args(list(argv))
        if ns.help:
            raise HelpRequested()

        config = resolve_config(ns, program_path=program_path)
        report = PipelineRunner(walker=walker, registry=registry).run(config)

        logger.info('Combined text saved to %s', config.output_file)
        logger.info('%s', report.summary())
        return report


def main(argv: Optional[Sequence[str]] = None, *, prog: Optional[str] = None) -> NoReturn:
    """Entry point for the `dumptext` console script and `python -m dumptext`."""
    _configure_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        DumpText.run(args, prog=prog)
        raise SystemExit(0)
    except DumpTextError as exc:
        if exc.message:
            logger.error('%s', exc.message)
        if exc.show_usage:
            sys.stdout.write(DumpText.usage(prog))
            sys.stdout.flush()
        raise SystemExit(exc.exit_code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()

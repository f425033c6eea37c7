from __future__ import annotations
"""Sequential pipeline: select extractor, walk, extract/filter, append.

Data flows strictly forward. Only `ExtractionError` is recovered here: the
file is reported as skipped and the run continues with the next candidate.
Every other error propagates to the caller.
"""
from typing import Optional

from dumptext.core.errors import ExtractionError
from dumptext.core.interfaces import ExtractorRegistryProtocol, WalkerProtocol
from dumptext.core.models import RunConfig
from dumptext.core.report import RunReport
from dumptext.io.extractors import default_extractor_registry
from dumptext.io.output import OutputAssembler
from dumptext.io.walker import TreeWalker
from dumptext.core.interfaces.logging import LoggerLikeProtocol
from dumptext.logging.helpers import get_logger
from dumptext.processing.line_ops import WordFilter
from dumptext.utils.paths import is_real_file

_RULE = '-' * 52


class PipelineRunner:
    def __init__(
        self,
        *,
        walker: Optional[WalkerProtocol] = None,
        registry: Optional[ExtractorRegistryProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('runner')
        self._walker = walker or TreeWalker()
        self._registry = registry or default_extractor_registry()

    def run(self, config: RunConfig) -> RunReport:
        report = RunReport()

        extractor = self._registry.select_for(config.extension)
        report.method = extractor.method.value

        self._log.info('Excluding directories: %s', ' '.join(sorted(config.exclude_dirs)))
        word_filter = WordFilter(config.exclude_words)
        if word_filter:
            self._log.info('Excluding lines containing words: %s', ' '.join(word_filter.words))
        else:
            self._log.info('No words specified for exclusion.')

        with OutputAssembler(config) as sink:
            self._log.info(
                "Processing '*.%s' files in directory: %s (sorted alphabetically)",
                config.extension,
                config.input_dir,
            )
            self._log.info(
                "Excluding script '%s' and output file '%s'.", config.program_name, config.output_basename
            )
            self._log.info('Saving combined text to: %s', config.output_file)
            self._log.info(_RULE)

            files = self._walker.gather_files(config)
            report.candidates = len(files)

            for fp in files:
                if not is_real_file(fp):
                    self._log.debug('skipping %s: no longer a regular file', fp)
                    continue

                self._log.info('Processing: %s', fp)
                try:
                    text = extractor.extract(fp)
                except ExtractionError as exc:
                    self._log.warning('%s', exc)
                    report.add_skipped(fp, exc.reason)
                    continue

                written = sink.append(fp, word_filter.filter_text(text))
                report.add_written(fp, written)

        self._log.info(_RULE)
        report.finish()
        return report

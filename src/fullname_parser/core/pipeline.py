from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from fullname_parser.batch.reader import locate_inputs, read_names
from fullname_parser.batch.writer import write_records
from fullname_parser.core.context import BatchContext
from fullname_parser.core.exceptions import BatchExecutionError, BatchInputError, PipelineError
from fullname_parser.dictionary import load_dictionary
from fullname_parser.parsing import FullNameParser


class BatchPipeline:
    """
    Parses every name list under the context's input path.
    No parsing logic lives here.

    Output naming: ``<output>/<input file name>.<format>``. When the input is
    a single file and the output path has an extension, the output path is
    used as the file itself.
    """

    def __init__(self, context: BatchContext):
        self.ctx = context
        self.log = context.logger

    def _output_for(self, source: Path, single_file: bool) -> Path:
        out = Path(self.ctx.output_path or ".")
        if single_file and out.suffix:
            return out
        return out / f"{source.name}.{self.ctx.format}"

    def run(self) -> Dict[str, int]:
        if not self.ctx.input_path:
            raise BatchInputError("No input path given")

        self.log.info("Batch starting: %s", self.ctx.input_path)

        try:
            sources: List[Path] = locate_inputs(self.ctx.input_path)
            parser = FullNameParser(load_dictionary(self.ctx.dictionary_path))

            single_file = Path(self.ctx.input_path).is_file()
            counts: Dict[str, int] = {}
            for source in sources:
                records = [parser.parse(name) for name in read_names(source)]
                target = self._output_for(source, single_file)
                counts[source.name] = write_records(
                    records, target, fmt=self.ctx.format, delimiter=self.ctx.delimiter
                )
                self.log.debug("Parsed %d names from %s", counts[source.name], source)

            self.ctx.stats["files"] = len(counts)
            self.ctx.stats["records"] = sum(counts.values())
            self.ctx.stats["per_file"] = counts

            self.log.info(
                "Batch completed: files=%d records=%d",
                self.ctx.stats["files"],
                self.ctx.stats["records"],
            )
            return counts

        except PipelineError as exc:
            self.ctx.errors.append(str(exc))
            raise

        except Exception as exc:
            self.ctx.errors.append(str(exc))
            self.log.exception("Batch execution failed")
            raise BatchExecutionError(str(exc)) from exc

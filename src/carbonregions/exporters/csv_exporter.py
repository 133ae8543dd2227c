import csv
import io
import os
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from ..models.region import HEADER, CloudRegion


class CSVExporter:
    """Writes the region table as CSV in the same ten-column layout it is read in."""

    def render(self, regions: Iterable[CloudRegion]) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(HEADER)
        for region in regions:
            writer.writerow(region.to_row())
        return output.getvalue()

    def export(self, regions: Iterable[CloudRegion], target: Optional[Union[str, Path, TextIO]] = None) -> int:
        """
        Writes the header and all rows in one pass and flushes. `target` is a
        path, an open text stream, or None for stdout. Returns the number of
        data rows written.

        Rows are rendered in memory first so an error while serializing never
        leaves a partial table behind.
        """
        rows = list(regions)
        content = self.render(rows)

        if isinstance(target, (str, Path)):
            os.makedirs(os.path.dirname(str(target)) or ".", exist_ok=True)
            with open(target, "w", encoding="utf-8", newline="") as fh:
                fh.write(content)
            return len(rows)

        out = target if target is not None else sys.stdout
        out.write(content)
        out.flush()
        return len(rows)

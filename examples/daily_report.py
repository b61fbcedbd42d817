from pathlib import Path

from headerdetail import HeaderDetailSplitter, HeaderExtractorConfig, SplitterConfig
from headerdetail.utils import setup_logging

DOCUMENT = """Report: Daily
Date: 2024-01-01
-----
Column
foo,1
bar,2
"""


def main() -> None:
    setup_logging("DEBUG")

    config = SplitterConfig(
        detail_line_field="line",
        header_extractor_configs=(
            HeaderExtractorConfig(line_number=1, regex=r"(Report): (\w+)"),
            HeaderExtractorConfig(line_number=2, regex=r"Date: (\S+)", key="date"),
        ),
    )
    splitter = HeaderDetailSplitter(config)

    print(f"▶ Splitting sample document ({len(DOCUMENT.splitlines())} lines)\n")
    for record in splitter.split({"text": DOCUMENT, "source": Path(__file__).name}):
        print(record)


if __name__ == "__main__":
    main()

# combine_datasets.py
"""
Merge true.csv and fake.csv into one labelled combined.csv.

Rows are split on every comma (no quote awareness) and anything with fewer
than four parts is dropped. The first four parts are quoted unless they
already start with a quote; the label is appended bare:
    false  ->  row came from true.csv
    true   ->  row came from fake.csv (hoax)
"""
from hoax_config import HoaxConfig

HEADER = "title,text,subject,date,label"
MIN_FIELDS = 4
LABEL_TRUE_NEWS = "false"
LABEL_HOAX = "true"


def quote_field(field: str) -> str:
    if field.startswith('"'):
        return field
    return '"' + field.replace('"', '""') + '"'


def unquote_field(field: str) -> str:
    """Undo one layer of `quote_field`; half-quoted parts come back unchanged."""
    if len(field) >= 2 and field.startswith('"') and field.endswith('"'):
        return field[1:-1].replace('""', '"')
    return field


def format_row(line: str, label: str):
    """Return the combined CSV row for `line`, or None when it is too short."""
    parts = line.split(",")
    if len(parts) < MIN_FIELDS:
        return None
    fields = [quote_field(p) for p in parts[:MIN_FIELDS]]
    return ",".join(fields + [label])


def read_data_lines(path):
    """All lines of `path` after the header, without line terminators."""
    with open(path, "r", encoding="utf-8-sig") as f:
        lines = [line.rstrip("\n") for line in f]
    return lines[1:]


def combine_datasets(config: HoaxConfig) -> int:
    print(f"Menggabungkan {config.true_path.name} dan {config.fake_path.name}...")

    true_lines = read_data_lines(config.true_path)
    fake_lines = read_data_lines(config.fake_path)

    written = 0
    with open(config.combined_path, "w", encoding="utf-8", newline="\n") as out:
        out.write(HEADER + "\n")
        for lines, label in ((true_lines, LABEL_TRUE_NEWS), (fake_lines, LABEL_HOAX)):
            for line in lines:
                row = format_row(line, label)
                if row is None:
                    continue
                out.write(row + "\n")
                written += 1

    print(f"✅ File {config.combined_path.name} berhasil dibuat dengan format aman.")
    return written


def ensure_combined(config: HoaxConfig) -> bool:
    """Build the combined file unless it already exists. Returns True if it wrote."""
    if config.combined_path.exists():
        return False
    combine_datasets(config)
    return True


if __name__ == "__main__":
    combine_datasets(HoaxConfig())

import argparse
import csv
from pathlib import Path
from typing import Dict, List, Tuple

from sarkari.config import get_settings
from sarkari.models.schema import ParsedJob
from .normalize import html_to_text
from .parse import last_date, parse_job_notification, total_posts


CSV_FIELDS = [
    "source",
    "title",
    "department",
    "type",
    "state",
    "totalPosts",
    "lastDate",
    "applyOnlineUrl",
    "notificationUrl",
    "officialWebsiteUrl",
]


def read_notice(path: Path) -> str:
    return html_to_text(path.read_text(encoding="utf-8", errors="replace"))


def parse_files(paths: List[Path], min_length: int) -> List[Tuple[str, ParsedJob]]:
    records: List[Tuple[str, ParsedJob]] = []
    seen = set()
    for idx, path in enumerate(paths, start=1):
        source = str(path)
        key = path.resolve()
        if key in seen:
            continue
        seen.add(key)
        text = read_notice(path)
        if len(text.strip()) < min_length:
            print(f"[parse] ({idx}/{len(paths)}) Skipping {source}: fewer than {min_length} characters")
            continue
        print(f"[parse] ({idx}/{len(paths)}) Parsing: {source}")
        records.append((source, parse_job_notification(text)))
    return records


def summary_row(source: str, job: ParsedJob) -> Dict:
    return {
        "source": source,
        "title": job.title,
        "department": job.department,
        "type": job.type.value,
        "state": job.state or "",
        "totalPosts": total_posts(job.vacancyDetails),
        "lastDate": last_date(job.importantDates) or "",
        "applyOnlineUrl": job.applyOnlineUrl or "",
        "notificationUrl": job.notificationUrl or "",
        "officialWebsiteUrl": job.officialWebsiteUrl or "",
    }


def write_outputs(records: List[Tuple[str, ParsedJob]], out_dir: Path):
    out_dir.mkdir(parents=True, exist_ok=True)

    # JSONL
    jsonl_path = out_dir / "jobs.jsonl"
    with jsonl_path.open("w", encoding="utf-8") as f:
        for _, job in records:
            f.write(job.model_dump_json(exclude_none=True))
            f.write("\n")

    # CSV (summary)
    csv_path = out_dir / "jobs.csv"
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for source, job in records:
            writer.writerow(summary_row(source, job))


def main(argv: List[str] | None = None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Parse government job notifications into JSON")
    parser.add_argument("inputs", nargs="+", help="text or HTML notification files")
    parser.add_argument("--output", type=str, default=settings.output_dir)
    args = parser.parse_args(argv)

    paths = [Path(p) for p in args.inputs]
    missing = [str(p) for p in paths if not p.is_file()]
    if missing:
        raise SystemExit(f"No such file: {', '.join(missing)}")

    records = parse_files(paths, settings.min_text_length)
    write_outputs(records, Path(args.output))
    print(f"[parse] Wrote {len(records)} records to {args.output}")


if __name__ == "__main__":
    main()

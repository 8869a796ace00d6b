"""
Upload endpoints: upload, list, delete CSV files in the inbox.
Reload lives in router_meta.py.
"""
from __future__ import annotations

import gzip
import re
from datetime import datetime

from fastapi import APIRouter, HTTPException, UploadFile, File

from csvcharts import config

router = APIRouter(prefix="/api", tags=["upload"])


def _safe_filename(filename: str) -> str:
    """Keep only the base name with conservative characters."""
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    return re.sub(r"[^\w\-. ()]", "_", base)


@router.post("/upload")
async def upload_csvs(files: list[UploadFile] = File(...)):
    """Upload one or more CSV files to the inbox."""
    saved = []
    for f in files:
        if not f.filename:
            raise HTTPException(400, "Missing filename")

        # Strip .gz suffix if present (browser gzip-compressed upload)
        filename = _safe_filename(f.filename)
        is_gzipped = filename.lower().endswith(".csv.gz")
        if is_gzipped:
            filename = filename[:-3]

        if not filename.lower().endswith(".csv"):
            raise HTTPException(400, f"Only .csv files are accepted (got '{f.filename}')")

        inbox = config.INBOX_FOLDER
        inbox.mkdir(parents=True, exist_ok=True)
        dest = inbox / filename

        content = await f.read()
        if is_gzipped:
            try:
                content = gzip.decompress(content)
            except OSError:
                raise HTTPException(400, f"Could not decompress '{f.filename}'")
        dest.write_bytes(content)
        saved.append({"name": filename, "path": str(dest.relative_to(inbox)), "size": len(content)})

    return {"status": "uploaded", "count": len(saved), "files": saved}


@router.get("/upload/files")
def list_files():
    """List all CSV files in the inbox with sizes."""
    inbox = config.INBOX_FOLDER
    files = []
    if inbox.exists():
        for csv_file in sorted(inbox.rglob("*.csv")):
            stat = csv_file.stat()
            files.append({
                "name": csv_file.name,
                "path": csv_file.relative_to(inbox).as_posix(),
                "size": stat.st_size,
                "modified": datetime.fromtimestamp(stat.st_mtime).isoformat(),
            })
    return {"files": files, "count": len(files), "inbox_path": str(inbox)}


@router.delete("/upload/{filename:path}")
def delete_file(filename: str):
    """Delete a specific CSV file from the inbox."""
    inbox = config.INBOX_FOLDER.resolve()
    target = (inbox / filename).resolve()
    # Ensure the target is actually inside the inbox
    if not target.is_relative_to(inbox):
        raise HTTPException(400, "Invalid file path")
    if not target.exists():
        raise HTTPException(404, f"File not found: {filename}")
    target.unlink()
    return {"status": "deleted", "file": filename}

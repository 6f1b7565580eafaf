"""
Run 'fqcheck check' end-to-end as a module, the way it runs from the shell
"""

import subprocess
import sys
from pathlib import Path

FASTQ = "@r1\nACGT\n+\n!!!!\n@r2\nACGT\n+\n!!\nr3\nAC\n+\n!!\n"


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "fqcheck", "--no-log", *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
    )


def test_basic_cli(tmp_path: Path):
    fq = tmp_path / "reads.fastq"
    fq.write_text(FASTQ, encoding="utf-8")
    bad = tmp_path / "bad.txt"

    proc = _run("check", "-i", str(fq), "-o", str(bad))

    assert proc.returncode == 0, f"STDERR:\n{proc.stderr}"
    assert "Found 2 invalid records." in proc.stdout
    assert bad.read_text(encoding="utf-8") == (
        "错误: LengthMismatchError(seq_len=4, qual_len=2, line_num=8)\n"
        "@r2\nACGT\n+\n!!\n---\n"
        "错误: InvalidHeaderError(line_num=9)\n"
        "r3\nAC\n+\n!!\n---\n"
    )


def test_basic_cli_truncated_input(tmp_path: Path):
    fq = tmp_path / "reads.fastq"
    fq.write_text("@r1\nACGT\n+\n", encoding="utf-8")

    proc = _run("check", "-i", str(fq))

    assert proc.returncode == 1
    assert "ERROR: check failed" in proc.stdout

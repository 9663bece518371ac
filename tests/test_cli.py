"""命令行测试"""

import io
import json

import pytest

from comment_aligner import transform
from comment_aligner.cli import main


def test_stdin_to_stdout(monkeypatch, capsys, sample_source):
    """无文件参数时从标准输入读取，写到标准输出"""
    monkeypatch.setattr("sys.stdin", io.StringIO(sample_source))
    assert main([]) == 0
    assert capsys.readouterr().out == transform(sample_source)


def test_min_column_option(monkeypatch, capsys):
    """--min-column 参数"""
    monkeypatch.setattr("sys.stdin", io.StringIO("a=1; // keep\nb=22; // also\n"))
    assert main(["--min-column", "10"]) == 0
    out = capsys.readouterr().out
    assert [line.index("//") for line in out.splitlines()] == [19, 19]


def test_files_to_stdout(capsys, sample_file, sample_source):
    """文件参数默认输出到标准输出，不修改文件"""
    assert main(["--min-column", "0", str(sample_file)]) == 0
    assert capsys.readouterr().out == transform(sample_source, 0)
    assert sample_file.read_text(encoding="utf-8") == sample_source


def test_in_place(sample_file, sample_source):
    """--in-place 改写文件"""
    assert main(["--min-column", "0", "--in-place", str(sample_file)]) == 0
    assert sample_file.read_text(encoding="utf-8") == transform(sample_source, 0)


def test_in_place_requires_files():
    """--in-place 需要文件参数"""
    assert main(["--in-place"]) == 1


def test_check_reports_violations(capsys, tmp_path):
    """--check 报告需要移动的注释并返回 1"""
    path = tmp_path / "a.c"
    path.write_text("a=1; // keep\nb=22; // also\n", encoding="utf-8")

    assert main(["--check", "--min-column", "10", str(path)]) == 1
    out = capsys.readouterr().out
    assert f"{path}:1: comment at col 6, expected 20" in out
    assert f"{path}:2: comment at col 7, expected 20" in out
    # nothing is written
    assert path.read_text(encoding="utf-8") == "a=1; // keep\nb=22; // also\n"


def test_check_aligned_file_passes(capsys, tmp_path):
    """已对齐文件通过检查"""
    path = tmp_path / "a.c"
    path.write_text(transform("a=1; // keep\nb=22; // also\n", 10), encoding="utf-8")
    assert main(["--check", "--min-column", "10", str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_check_and_in_place_exclusive(sample_file):
    """--check 与 --in-place 互斥"""
    with pytest.raises(SystemExit) as exc:
        main(["--check", "--in-place", str(sample_file)])
    assert exc.value.code == 2


def test_custom_marker(monkeypatch, capsys):
    """--marker 参数"""
    monkeypatch.setattr("sys.stdin", io.StringIO("x = 1  # one\nlonger = 22 # two\n"))
    assert main(["--marker", "#", "--min-column", "0"]) == 0
    out = capsys.readouterr().out
    assert [line.index("#") for line in out.splitlines()] == [19, 19]


def test_keep_missing_newline(monkeypatch, capsys):
    """--keep-missing-newline 参数"""
    monkeypatch.setattr("sys.stdin", io.StringIO("a // c"))
    assert main(["--min-column", "0", "--keep-missing-newline"]) == 0
    assert capsys.readouterr().out == "a" + " " * 8 + "// c"


def test_negative_min_column(monkeypatch):
    """负数最小列返回错误"""
    monkeypatch.setattr("sys.stdin", io.StringIO("a; // c\n"))
    assert main(["--min-column", "-1"]) == 1


def test_missing_file(tmp_path):
    """文件不存在返回错误"""
    assert main([str(tmp_path / "missing.c")]) == 1


def test_report_option(sample_file, tmp_path, capsys):
    """--report 写入 JSON 报告"""
    report = tmp_path / "reports" / "align.json"
    assert main(["--min-column", "0", "--report", str(report), str(sample_file)]) == 0

    data = json.loads(report.read_text(encoding="utf-8"))
    assert len(data["files"]) == 1
    assert data["files"][0]["source_path"] == str(sample_file)
    assert data["files"][0]["summary"]["lines"]["changed"] == 2

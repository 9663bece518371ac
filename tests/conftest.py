"""Pytest 配置和 fixtures

定义所有测试共享的 fixtures 和配置。
"""

import pytest
from pathlib import Path

from comment_aligner import CommentAligner


@pytest.fixture
def project_root():
    """获取项目根目录"""
    return Path(__file__).parent.parent


@pytest.fixture
def aligner():
    """创建最小列为 0 的对齐器"""
    return CommentAligner(min_column=0)


@pytest.fixture
def sample_source():
    """包含战术注释、战略注释和普通代码的示例源码"""
    return (
        "int a = 1; // one\n"
        "int bb = 22;    // two\n"
        "// strategic\n"
        "int c;\n"
    )


@pytest.fixture
def sample_file(tmp_path, sample_source):
    """写入临时目录的示例源文件"""
    path = tmp_path / "Sample.java"
    path.write_text(sample_source, encoding="utf-8")
    return path

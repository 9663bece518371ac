#!/usr/bin/env python3
"""
数据模型测试 - 使用pytest框架
"""

import pytest
from comment_aligner.models import (
    AlignmentResult,
    ColumnSelection,
    InvalidColumnError,
    LineComment,
    LineEdit,
    LineKind,
)


def _selection(column=19):
    return ColumnSelection(
        min_column=10,
        candidate=10,
        base_one=11,
        misalignment=1,
        shift=9,
        column=column,
        widest_line=1,
    )


def test_line_comment_fragments():
    """测试代码片段与注释片段拆分"""
    parsed = LineComment(line="x = 1;  // c", comment_index=8, kind=LineKind.TACTICAL)
    assert parsed.code == "x = 1;  "
    assert parsed.comment == "// c"
    assert parsed.is_tactical


def test_line_comment_without_marker():
    """测试无注释行"""
    parsed = LineComment(line="x = 1;", comment_index=None, kind=LineKind.CODE)
    assert parsed.code == "x = 1;"
    assert parsed.comment == ""
    assert not parsed.is_tactical


def test_column_selection_serialization():
    """测试列选择序列化"""
    data = _selection().to_dict()
    assert data["column"] == 19
    assert data["column_one_based"] == 20
    assert data["widest_line"] == 1


def test_column_selection_repr():
    """测试列选择表示字符串"""
    repr_str = repr(_selection())
    assert "column=19" in repr_str
    assert "shift=9" in repr_str


def test_line_edit_changed():
    """测试行编辑记录"""
    edit = LineEdit(
        line_number=1,
        kind=LineKind.TACTICAL,
        before="a; // c",
        after="a;       // c",
        padding=7,
    )
    assert edit.changed
    assert edit.to_dict()["kind"] == "tactical"

    same = LineEdit(2, LineKind.STRATEGIC, "// c", "// c")
    assert not same.changed


def test_alignment_result_serialization():
    """测试对齐结果序列化"""
    edits = [
        LineEdit(1, LineKind.TACTICAL, "a; // c", "a;" + " " * 17 + "// c", 17),
        LineEdit(2, LineKind.STRATEGIC, "// s", "// s"),
    ]
    result = AlignmentResult(text="...", selection=_selection(), edits=edits)

    assert result.changed_edits == [edits[0]]
    data = result.to_dict()
    assert "text" not in data
    assert len(data["edits"]) == 2
    assert result.to_dict(include_text=True)["text"] == "..."


def test_invalid_column_error_is_value_error():
    """测试异常类型"""
    with pytest.raises(ValueError):
        raise InvalidColumnError("bad column")

"""对齐数据模型

包含注释对齐相关的所有数据结构、枚举和异常类。
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
from enum import Enum


class LineKind(Enum):
    """行类型"""

    CODE = "code"  # 没有注释标记
    TACTICAL = "tactical"  # 代码后的行尾注释
    STRATEGIC = "strategic"  # 独占一行的注释（包括被注释掉的代码）


class InvalidColumnError(ValueError):
    """Raised when an alignment parameter cannot produce a valid column.

    Negative minimum columns and empty comment markers are rejected with
    this error so callers can tell bad configuration apart from other
    ValueError conditions.
    """

    def __init__(self, message: str):
        super().__init__(message)


@dataclass
class LineComment:
    """A single line split at its first comment marker."""

    line: str
    comment_index: Optional[int]
    kind: LineKind

    @property
    def code(self) -> str:
        """Code fragment (everything before the marker, untrimmed)"""
        if self.comment_index is None:
            return self.line
        return self.line[: self.comment_index]

    @property
    def comment(self) -> str:
        """Comment fragment (marker to end of line)"""
        if self.comment_index is None:
            return ""
        return self.line[self.comment_index :]

    @property
    def is_tactical(self) -> bool:
        return self.kind is LineKind.TACTICAL


@dataclass
class ColumnSelection:
    """列选择结果

    保留计算过程中的中间值，便于调试和报告。
    """

    min_column: int
    candidate: int
    base_one: int
    misalignment: int
    shift: int
    column: int
    widest_line: Optional[int] = None  # 0-based，决定列位置的行；None 表示使用最小值

    def __repr__(self):
        return (
            f"ColumnSelection(column={self.column}, candidate={self.candidate}, "
            f"shift={self.shift}, min={self.min_column})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "min_column": self.min_column,
            "candidate": self.candidate,
            "base_one": self.base_one,
            "misalignment": self.misalignment,
            "shift": self.shift,
            "column": self.column,
            "column_one_based": self.column + 1,
            "widest_line": self.widest_line,
        }


@dataclass
class LineEdit:
    """单行对齐记录"""

    line_number: int  # 1-based
    kind: LineKind
    before: str
    after: str
    padding: int = 0  # 插入的空格数

    @property
    def changed(self) -> bool:
        return self.before != self.after

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "line_number": self.line_number,
            "kind": self.kind.value,
            "before": self.before,
            "after": self.after,
            "padding": self.padding,
            "changed": self.changed,
        }


@dataclass
class AlignmentResult:
    """一次对齐的完整结果"""

    text: str
    selection: ColumnSelection
    edits: List[LineEdit] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)
    source_path: Optional[str] = None

    @property
    def changed_edits(self) -> List[LineEdit]:
        return [e for e in self.edits if e.changed]

    def to_dict(self, include_text: bool = False) -> Dict[str, Any]:
        """转换为字典"""
        data = {
            "source_path": self.source_path,
            "selection": self.selection.to_dict(),
            "stats": self.stats,
            "edits": [e.to_dict() for e in self.edits],
        }
        if include_text:
            data["text"] = self.text
        return data

"""
Test Scripts - 测试脚本集合

此目录包含注释对齐功能的测试。

测试列表:

1. test_all.py - 数据模型基础测试
   LineKind / ColumnSelection / LineEdit / AlignmentResult

2. test_classifier.py - 注释定位与分类测试
   测试注释标记定位、战术注释与战略注释的区分

3. test_selector.py - 列选择测试
   测试最长代码行、最小列、十列边界对齐

4. test_rewriter.py - 行重写测试

5. test_transform.py - 完整流程测试
   幂等性、代码保留、换行处理

6. test_api.py / test_cli.py - 高层 API 与命令行测试

运行所有测试:
  python -m pytest tests/ -v
"""

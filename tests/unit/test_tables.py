"""Unit tests for the CLI table builders."""

from daolint.cli._tables import build_enumerators_table, build_report_table, build_supertypes_table
from daolint.core.models import DaoReport


class TestReportTable:
    """Tests for build_report_table()."""

    def test_title_keeps_brackets_in_file_path(self) -> None:
        report = DaoReport(
            file_path="src/[gen]/InvoiceDAO.java",
            class_name="InvoiceDAO",
            entity_name="Invoice",
            conforming=["get/0"],
        )
        table = build_report_table(report)
        assert "src/\\[gen]/InvoiceDAO.java" in str(table.title)
        assert table.row_count == 1

    def test_title_without_file_path(self) -> None:
        report = DaoReport(class_name="InvoiceDAO", entity_name="Invoice")
        assert build_report_table(report).title == "InvoiceDAO (entity: Invoice)"


class TestKnowledgeTables:
    """Tests for the knowledge listing tables."""

    def test_enumerators_sorted(self) -> None:
        table = build_enumerators_table({"Status", "Kind"})
        assert list(table.columns[0].cells) == ["Kind", "Status"]

    def test_supertypes_sorted(self) -> None:
        table = build_supertypes_table({"Receipt": {"Serializable", "Document"}})
        assert list(table.columns[1].cells) == ["Document, Serializable"]

"""Integration tests for the analyzer service over a source tree."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from daolint.core.config import DaolintConfig
from daolint.services import AnalyzerService


@pytest.fixture
def config() -> DaolintConfig:
    with patch.dict(os.environ, {}, clear=True):
        return DaolintConfig(_env_file=None)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small Java project with two DAOs, a model and a shared enum."""
    src = tmp_path / "src"
    (src / "dao").mkdir(parents=True)
    (src / "model").mkdir()
    (src / "dao" / "InvoiceDAO.java").write_text(
        """
        package dao;

        public class InvoiceDAO {
            public InvoiceDAO() {}
            public Invoice find(long id) { return null; }
            public Status status(Invoice invoice) { return null; }
            public Receipt receipt() { return null; }
            public Car car() { return null; }
        }
        """
    )
    (src / "dao" / "CarDAO.java").write_text(
        """
        package dao;

        public class CarDAO {
            public List<Car> all() { return null; }
            public Invoice invoice() { return null; }
        }
        """
    )
    (src / "model" / "Status.java").write_text("public enum Status { OPEN, PAID }")
    (src / "model" / "Receipt.java").write_text("public class Receipt extends Invoice {}")
    (src / "model" / "Helper.java").write_text("public class Helper { public Car x() { return null; } }")
    return src


class TestCheck:
    """Tests for AnalyzerService.check()."""

    def test_reports_per_dao(self, config: DaolintConfig, project: Path) -> None:
        result = AnalyzerService(config).check(project)

        assert result.success
        assert result.files_scanned == 5
        assert result.enumerators_count == 1
        assert [r.class_name for r in result.reports] == ["CarDAO", "InvoiceDAO"]

        car, invoice = result.reports
        assert car.file_path == "dao/CarDAO.java"
        assert car.entity_name == "Car"
        assert car.conforming == ["all/0"]
        assert car.non_conforming == ["invoice/0"]

        assert invoice.conforming == ["find/1[long]", "receipt/0", "status/1[Invoice]"]
        assert invoice.non_conforming == ["car/0"]

        assert result.classes_checked == 2
        assert result.conforming_count == 4
        assert result.violation_count == 2

    def test_all_classes(self, config: DaolintConfig, project: Path) -> None:
        service = AnalyzerService(config.model_copy(update={"dao_only": False}))
        result = service.check(project)
        names = {r.class_name for r in result.reports}
        assert names == {"CarDAO", "InvoiceDAO", "Helper", "Status", "Receipt"}
        helper = next(r for r in result.reports if r.class_name == "Helper")
        assert helper.entity_name == "Helper"
        assert helper.non_conforming == ["x/0"]

    def test_custom_suffix(self, config: DaolintConfig, tmp_path: Path) -> None:
        (tmp_path / "InvoiceRepository.java").write_text(
            "class InvoiceRepository { public Invoice get() { return null; } }"
        )
        service = AnalyzerService(config.model_copy(update={"entity_suffix": "Repository"}))
        result = service.check(tmp_path)
        assert result.reports[0].entity_name == "Invoice"
        assert result.reports[0].conforming == ["get/0"]

    def test_extra_knowledge_path(self, config: DaolintConfig, tmp_path: Path) -> None:
        src = tmp_path / "src"
        lib = tmp_path / "lib"
        src.mkdir()
        lib.mkdir()
        (src / "InvoiceDAO.java").write_text(
            "class InvoiceDAO { public Kind kind() { return null; } }"
        )
        (lib / "Kind.java").write_text("enum Kind { A }")

        without = AnalyzerService(config).check(src)
        assert without.reports[0].non_conforming == ["kind/0"]

        with_lib = AnalyzerService(config).check(src, [lib])
        assert with_lib.reports[0].conforming == ["kind/0"]

    def test_transitive_supertypes(self, config: DaolintConfig, tmp_path: Path) -> None:
        (tmp_path / "InvoiceDAO.java").write_text(
            "class InvoiceDAO { public Receipt get() { return null; } }"
        )
        (tmp_path / "Receipt.java").write_text("class Receipt extends Document {}")
        (tmp_path / "Document.java").write_text("class Document extends Invoice {}")

        single = AnalyzerService(config).check(tmp_path)
        assert single.reports[0].non_conforming == ["get/0"]

        transitive = AnalyzerService(config.model_copy(update={"transitive_supertypes": True}))
        assert transitive.check(tmp_path).reports[0].conforming == ["get/0"]

    def test_single_file(self, config: DaolintConfig, project: Path) -> None:
        result = AnalyzerService(config).check(project / "dao" / "CarDAO.java")
        assert [r.class_name for r in result.reports] == ["CarDAO"]
        assert result.reports[0].file_path == "CarDAO.java"

    def test_missing_path(self, config: DaolintConfig, tmp_path: Path) -> None:
        result = AnalyzerService(config).check(tmp_path / "missing")
        assert not result.success
        assert "does not exist" in result.errors[0]

    def test_undecodable_file_recorded(self, config: DaolintConfig, tmp_path: Path) -> None:
        (tmp_path / "BrokenDAO.java").write_bytes(b"class BrokenDAO { \xff\xfe }")
        (tmp_path / "InvoiceDAO.java").write_text(
            "class InvoiceDAO { public Invoice get() { return null; } }"
        )
        result = AnalyzerService(config).check(tmp_path)
        assert not result.success
        assert len(result.errors) == 1
        assert "BrokenDAO.java" in result.errors[0]
        assert [r.class_name for r in result.reports] == ["InvoiceDAO"]

    def test_to_report(self, config: DaolintConfig, project: Path) -> None:
        report = AnalyzerService(config).check(project).to_report("DAO")
        assert report.entity_suffix == "DAO"
        assert report.violation_count == 2

    def test_deeply_nested_expression(self, config: DaolintConfig, tmp_path: Path) -> None:
        concatenation = " + ".join(['"a"'] * 3000)
        (tmp_path / "InvoiceDAO.java").write_text(
            f"class InvoiceDAO {{ public Invoice get() {{ String s = {concatenation}; return null; }} }}"
        )
        result = AnalyzerService(config).check(tmp_path)
        assert result.success
        assert result.reports[0].conforming == ["get/0"]

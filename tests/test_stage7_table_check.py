import pytest
from belnapian import TableVerifier, verify
from belnapian.check.passes import CommutativityPass, TableSoundnessPass, TotalityPass
from belnapian.check.pipeline import Algebra, CheckConfig, CheckPipeline, DiagnosticSink, Operation, Pass
from belnapian.check.semantics import collapse, expected, lift, lift_unary
from belnapian.core import unknown as unknown_mod
from belnapian.core.belnapian import Belnapian
from belnapian.core.errors import NotRepresentableError
from belnapian.core.extended import EBelnapian
from belnapian.core.laws import Law
from belnapian.core.powerset import PowerSet
from belnapian.core.unknown import Unknown

def codes(report):
    return {d.code for d in report.errors}

def test_shipped_tables_pass():
    report = verify()
    assert report.success, str(report)
    assert report.errors == []

def test_report_text():
    text = str(verify())
    assert "Belnapian Table Check" in text
    assert "Errors: 0" in text

def test_algebra_covers_all_operations():
    algebra = CheckPipeline(CheckConfig()).build_algebra()
    assert len(algebra.domains["EBelnapian"]) == 15
    assert algebra.operation("Belnapian", "xor") is not None
    assert algebra.operation("TernaryValue", "xor") is not None
    assert algebra.operation("EBelnapian", "xor") is None
    assert algebra.operation("Unknown", "xor") is None
    assert set(algebra.mixed) == {"and_", "or_", "superposition", "annihilation", "eq"}

def test_lift_and_collapse():
    assert lift("and_", Unknown.NF, Unknown.FB) == PowerSet.F
    assert expected("and_", Unknown.NF, Unknown.FB) == EBelnapian.known(Belnapian.FALSE)
    assert expected("or_", Belnapian.NEITHER, Unknown.FT) == EBelnapian.unknown(Unknown.NT)
    with pytest.raises(ValueError):
        collapse(PowerSet.EMPTY)

def test_detects_loose_entry(monkeypatch):
    monkeypatch.setitem(unknown_mod._AND, (Unknown.NF, Unknown.FB), EBelnapian.unknown(Unknown.NF))
    verifier = TableVerifier()
    verifier.add(TableSoundnessPass())
    report = verifier.verify()

    assert not report.success
    assert codes(report) == {"T003"}
    assert any(d.location == "Unknown.and_(NF, FB)" for d in report.errors)

def test_detects_unsound_collapse(monkeypatch):
    monkeypatch.setitem(unknown_mod._AND, (Unknown.NF, Unknown.NT), EBelnapian.known(Belnapian.FALSE))
    report = verify()

    assert not report.success
    assert "T002" in codes(report)
    # Only one direction was changed
    assert "T005" in codes(report)

def test_detects_raising_operation(monkeypatch):
    monkeypatch.delitem(unknown_mod._OR, (Unknown.FT, Unknown.TB))
    verifier = TableVerifier()
    verifier.add(TotalityPass())
    report = verifier.verify()

    assert codes(report) == {"T001"}
    assert any("KeyError" in d.message for d in report.errors)

class AlwaysFails(Pass):
    name = "AlwaysFails"

    def run(self, algebra, diag):
        diag.error("X001", "broken on purpose")

class Recorder(Pass):
    name = "Recorder"

    def __init__(self):
        self.ran = False

    def run(self, algebra, diag):
        self.ran = True

def test_fail_fast_stops_after_first_error():
    recorder = Recorder()
    verifier = TableVerifier(fail_fast=True)
    verifier.add(AlwaysFails(), recorder)
    report = verifier.verify()

    assert not report.success
    assert not recorder.ran
    assert verifier.report is report

def test_without_fail_fast_all_passes_run():
    recorder = Recorder()
    verifier = TableVerifier()
    verifier.add(AlwaysFails(), recorder, CommutativityPass())
    report = verifier.verify()

    assert recorder.ran
    assert codes(report) == {"X001"}
    assert "[X001] broken on purpose" in str(report)

def test_detects_wrong_negation(monkeypatch):
    monkeypatch.setitem(unknown_mod._NOT, Unknown.NF, Unknown.NF)
    verifier = TableVerifier()
    verifier.add(TableSoundnessPass())
    report = verifier.verify()

    assert codes(report) == {"T003"}
    assert [d.location for d in report.errors] == ["Unknown.not_(NF)"]
    assert lift_unary("not_", Unknown.NF) == PowerSet.NT

def _raises(x):
    raise NotRepresentableError(x, "bool")

def _single_op_algebra(law):
    return Algebra(
        domains={"Belnapian": tuple(Belnapian), "Unknown": tuple(Unknown)},
        operations=[Operation("Belnapian", "to_bool", _raises, 1, law)],
    )

def test_totality_skips_partial_operations():
    diag = DiagnosticSink()
    TotalityPass().run(_single_op_algebra(Law(total=False)), diag)
    assert diag.diagnostics == []

def test_totality_flags_raising_total_operations():
    diag = DiagnosticSink()
    TotalityPass().run(_single_op_algebra(Law()), diag)
    assert len(diag.diagnostics) == 4
    assert all(d.code == "T001" for d in diag.diagnostics)

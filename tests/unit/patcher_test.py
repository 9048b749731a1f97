"""Unit tests for applying @name directives to source lines."""

from swagger_annotator.core.patcher import apply_annotations, format_directive
from swagger_annotator.models import ProcessingResult


def test_format_directive() -> None:
    assert format_directive("rental.v1.", "RentalRes") == "@name rental.v1.RentalRes"


def test_appends_missing_directive() -> None:
    lines = ["type Rental struct {", "\tID string", "}"]
    result = ProcessingResult()

    changed = apply_annotations(lines, {2: "RentalRes"}, "rental.v1.", "rental.go", result)

    assert changed == 1
    assert lines[2] == "} // @name rental.v1.RentalRes"
    assert result.annotations_added == 1
    assert result.annotations_replaced == 0


def test_replaces_stale_directive() -> None:
    lines = ["type Foo struct{} // @name old.v1.Foo"]
    result = ProcessingResult()

    changed = apply_annotations(lines, {0: "FooRes"}, "proj.v1.", "foo.go", result)

    assert changed == 1
    assert lines[0] == "type Foo struct{} // @name proj.v1.FooRes"
    assert lines[0].count("@name") == 1
    assert result.annotations_replaced == 1
    assert result.annotations_added == 0


def test_replacement_drops_text_after_old_directive() -> None:
    lines = ["}   //@name old.Foo trailing words"]
    apply_annotations(lines, {0: "FooRes"}, "proj.v1.", "foo.go", ProcessingResult())
    assert lines == ["} // @name proj.v1.FooRes"]


def test_correct_directive_is_untouched() -> None:
    original = "}  // @name proj.v1.FooRes"
    lines = [original]
    result = ProcessingResult()

    changed = apply_annotations(lines, {0: "FooRes"}, "proj.v1.", "foo.go", result)

    assert changed == 0
    assert lines == [original]
    assert result.annotations_added == result.annotations_replaced == 0


def test_longer_stale_name_is_not_mistaken_for_correct() -> None:
    lines = ["} // @name proj.v1.FooResOld"]
    changed = apply_annotations(lines, {0: "FooRes"}, "proj.v1.", "foo.go", ProcessingResult())
    assert changed == 1
    assert lines == ["} // @name proj.v1.FooRes"]


def test_second_pass_is_a_no_op() -> None:
    lines = ["type A struct{}", "type B struct{} // @name x.B"]
    plan = {0: "ARes", 1: "BRes"}
    apply_annotations(lines, plan, "p.v2.", "ab.go", ProcessingResult())
    snapshot = list(lines)

    second = ProcessingResult()
    assert apply_annotations(lines, plan, "p.v2.", "ab.go", second) == 0
    assert lines == snapshot
    assert second.annotations_added == second.annotations_replaced == 0


def test_keeps_carriage_return() -> None:
    lines = ["}\r"]
    apply_annotations(lines, {0: "FooRes"}, "p.v1.", "foo.go", ProcessingResult())
    assert lines == ["} // @name p.v1.FooRes\r"]


def test_only_planned_lines_change() -> None:
    lines = ["package response", "", "type A struct{}", "// @name stray.Comment"]
    apply_annotations(lines, {2: "ARes"}, "p.v1.", "a.go", ProcessingResult())
    assert lines[0] == "package response"
    assert lines[3] == "// @name stray.Comment"
    assert lines[2] == "type A struct{} // @name p.v1.ARes"

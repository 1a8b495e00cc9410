from ninjascript_checker import audit
from ninjascript_checker.checkers import BrushChecker, SyntaxChecker
from ninjascript_checker.fixer import fix_brush_serialization, fixable_subjects
from ninjascript_checker.issue import Severity
from ninjascript_checker.utils import SourceIndex

from samples import BARE_BRUSH_INDICATOR, CLEAN_INDICATOR, make_indicator


def test_serializable_brush_passes(run_checker):
    assert run_checker(BrushChecker, CLEAN_INDICATOR) == []


def test_bare_brush_has_two_fixable_errors(run_checker):
    issues = run_checker(BrushChecker, BARE_BRUSH_INDICATOR)
    assert len(issues) == 2
    assert all(i.severity == Severity.ERROR for i in issues)
    assert all(i.auto_fixable for i in issues)
    assert {i.subject for i in issues} == {"UpColor"}
    assert "[XmlIgnore]" in issues[0].message
    assert "UpColorSerializable" in issues[1].message


def test_xml_ignore_on_same_line(run_checker):
    code = CLEAN_INDICATOR.replace(
        "        [XmlIgnore]\n        [Display(Name = \"Arrow color\"",
        "        [Display(Name = \"Arrow color\"",
    ).replace("public Brush ArrowBrush", "[XmlIgnore] public Brush ArrowBrush")
    assert run_checker(BrushChecker, code) == []


def test_xml_ignore_of_previous_member_does_not_count(run_checker):
    code = BARE_BRUSH_INDICATOR.replace(
        "        [Display(Name = \"Up color\"",
        "        [XmlIgnore]\n        public Brush Other { get; set; }\n\n        [Display(Name = \"Up color\"",
    )
    issues = run_checker(BrushChecker, code)
    missing_marker = [i for i in issues if "[XmlIgnore]" in i.message and i.subject == "UpColor"]
    assert len(missing_marker) == 1


def test_companion_with_wrong_conversion_is_not_fixable(run_checker):
    code = CLEAN_INDICATOR.replace(
        "Serialize.BrushToString(ArrowBrush)", "ArrowBrush.ToString()"
    )
    issues = run_checker(BrushChecker, code)
    assert len(issues) == 1
    assert issues[0].severity == Severity.ERROR
    assert not issues[0].auto_fixable


def test_commented_out_property_is_ignored(run_checker):
    code = CLEAN_INDICATOR.replace(
        "public Brush ArrowBrush { get; set; }",
        "public Brush ArrowBrush { get; set; }\n        // public Brush OldBrush { get; set; }",
    )
    assert run_checker(BrushChecker, code) == []


def test_fix_makes_brush_checks_pass(run_checker):
    issues = run_checker(BrushChecker, BARE_BRUSH_INDICATOR)
    fixed = fix_brush_serialization(BARE_BRUSH_INDICATOR, issues)
    assert "[XmlIgnore]" in fixed
    assert "public string UpColorSerializable" in fixed
    assert run_checker(BrushChecker, fixed) == []


def test_fix_is_idempotent(run_checker):
    issues = run_checker(BrushChecker, BARE_BRUSH_INDICATOR)
    once = fix_brush_serialization(BARE_BRUSH_INDICATOR, issues)
    twice = fix_brush_serialization(once, issues)
    assert twice == once


def test_fix_keeps_crlf_line_endings(run_checker):
    code = BARE_BRUSH_INDICATOR.replace("\n", "\r\n")
    issues = run_checker(BrushChecker, code)
    fixed = fix_brush_serialization(code, issues)
    assert "\n" not in fixed.replace("\r\n", "")
    assert BrushChecker().check(SourceIndex(fixed)) == []


def test_companion_conversion_is_checked_per_property(run_checker):
    code = make_indicator(properties=(
        "\n        [XmlIgnore]"
        "\n        [Display(Name = \"Down color\", Order = 3, GroupName = \"Colors\")]"
        "\n        public Brush DownBrush { get; set; }"
        "\n"
        "\n        [Browsable(false)]"
        "\n        public string DownBrushSerializable"
        "\n        {"
        "\n            get { return Serialize.BrushToString(DownBrush); }"
        "\n            set { }"
        "\n        }"
    ))
    issues = run_checker(BrushChecker, code)
    assert [(i.subject, i.auto_fixable) for i in issues] == [("DownBrush", False)]


def test_xml_ignore_in_combined_attribute_list(run_checker):
    code = CLEAN_INDICATOR.replace(
        "        [XmlIgnore]\n"
        "        [Display(Name = \"Arrow color\", Order = 2, GroupName = \"Colors\")]",
        "        [Display(Name = \"Arrow color\", Order = 2, GroupName = \"Colors\"), XmlIgnore]",
    )
    assert "[XmlIgnore]" not in code
    assert run_checker(BrushChecker, code) == []
    assert audit(code, auto_fix=True).fixed_code is None


def test_fix_places_companion_after_initializer(run_checker):
    code = BARE_BRUSH_INDICATOR.replace(
        "public Brush UpColor { get; set; }",
        "public Brush UpColor { get; set; } = Brushes.Green;",
    )
    fixed = fix_brush_serialization(code, run_checker(BrushChecker, code))
    assert "public Brush UpColor { get; set; } = Brushes.Green;\n\n" in fixed
    assert fixed.index("= Brushes.Green;\n\n") < fixed.index("UpColorSerializable")
    assert "} = Brushes.Green;" not in fixed.split("UpColorSerializable", 1)[1]
    assert run_checker(BrushChecker, fixed) == []
    assert run_checker(SyntaxChecker, fixed) == []


def test_fixable_subjects_ignores_other_checks(run_checker):
    issues = run_checker(BrushChecker, BARE_BRUSH_INDICATOR)
    assert fixable_subjects(issues) == ["UpColor"]
    assert fixable_subjects([]) == []

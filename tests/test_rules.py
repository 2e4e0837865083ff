"""Rule catalog behavior tests."""

import re
import unittest

from app.services.glide2wolken.rules import (
    ALERT_RULES,
    CLEANUP_RULES,
    FALLBACK_RULES,
    RECORD_RULES,
    SYSTEM_API_RULES,
    build_form_rules,
    fixed_rule_groups,
    rule,
)
from app.services.glide2wolken.types import FormType


class SystemApiRuleTests(unittest.TestCase):
    def test_logging_calls_become_console_log(self) -> None:
        self.assertEqual(SYSTEM_API_RULES.apply('gs.log("x")'), 'console.log("x")')
        self.assertEqual(SYSTEM_API_RULES.apply('gs.info ("x")'), 'console.log("x")')
        self.assertEqual(SYSTEM_API_RULES.apply('gs.error("x")'), 'console.log("x")')

    def test_user_session_and_property(self) -> None:
        self.assertEqual(SYSTEM_API_RULES.apply("gs.getUser()"), "ele.currentUser")
        self.assertEqual(SYSTEM_API_RULES.apply("gs.getSession()"), "ele.session")
        self.assertEqual(
            SYSTEM_API_RULES.apply("gs.getProperty('glide.servlet.uri')"),
            'ele.getProperty("glide.servlet.uri")',
        )

    def test_notifications_are_tagged_with_severity(self) -> None:
        self.assertEqual(
            SYSTEM_API_RULES.apply('gs.addErrorMessage("bad");'),
            'ele.showNotification("error", "bad")',
        )
        self.assertEqual(
            SYSTEM_API_RULES.apply('gs.addWarningMessage(msg)'),
            'ele.showNotification("warning", msg)',
        )

    def test_nil_and_is_valid_expand_inline(self) -> None:
        self.assertEqual(
            SYSTEM_API_RULES.apply("gs.nil(x)"),
            '!x || x === "" || x === null || x === undefined',
        )
        self.assertEqual(
            SYSTEM_API_RULES.apply("gs.isValid(x)"),
            'x && x !== "" && x !== null && x !== undefined',
        )


class AlertAndRecordRuleTests(unittest.TestCase):
    def test_alert_becomes_snackbar(self) -> None:
        self.assertEqual(
            ALERT_RULES.apply('alert("a", 1)'),
            'ele.messageSnackbarService.showMessageSnackBar("a", 1)',
        )

    def test_record_fields_use_bracket_access(self) -> None:
        self.assertEqual(RECORD_RULES.apply("current.category"), 'ele.current["category"]')
        self.assertEqual(
            RECORD_RULES.apply("workflow.scratchpad.approved"),
            'ele.workflow["scratchpad"].approved',
        )

    def test_record_field_stops_at_non_ascii_letter(self) -> None:
        self.assertEqual(RECORD_RULES.apply("current.número"), 'ele.current["n"]úmero')
        self.assertEqual(
            RECORD_RULES.apply('var gr = new GlideRecord("tabla_é");'),
            'var gr = new GlideRecord("tabla_é");',
        )

    def test_glide_record_construction_is_commented_out(self) -> None:
        self.assertEqual(
            RECORD_RULES.apply('var gr = new GlideRecord("incident");'),
            "// gr = GlideRecord for incident - use Angular service instead",
        )


class FormRuleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.rules = build_form_rules(FormType.MODIFIED_FIELDS)

    def test_group_covers_all_form_calls(self) -> None:
        self.assertEqual(len(self.rules), 19)
        self.assertEqual(self.rules.name, "formApi:modifiedFields")

    def test_value_operations(self) -> None:
        self.assertEqual(
            self.rules.apply("g_form.getValue( 'state' )"),
            'ele.modifiedFields.get("state").value',
        )
        self.assertEqual(
            self.rules.apply('g_form.setValue("state", 2)'),
            'ele.modifiedFields.get("state").setValue(2)',
        )
        self.assertEqual(
            self.rules.apply("g_form.patchValue(values)"),
            "ele.modifiedFields.patchValue(values)",
        )
        self.assertEqual(
            self.rules.apply("g_form.clearValue('state')"),
            'ele.modifiedFields.get("state").setValue("")',
        )

    def test_read_only_drops_flag(self) -> None:
        self.assertEqual(
            self.rules.apply('g_form.setReadOnly("state", false)'),
            'ele.modifiedFields.get("state").disable()',
        )

    def test_field_messages(self) -> None:
        self.assertEqual(
            self.rules.apply('g_form.showFieldMsg("f","msg","error")'),
            'ele.showFieldMessage("f", "msg", "error")',
        )
        self.assertEqual(self.rules.apply('g_form.hideFieldMsg("f")'), 'ele.hideFieldMessage("f")')

    def test_field_modes(self) -> None:
        self.assertEqual(
            self.rules.apply('g_form.setMandatory("short_description", true)'),
            'ele.utilitiesService.toggleFieldMode(ele, "short_description", '
            'true ? "mandatory" : "nonMandatory")',
        )
        self.assertEqual(
            self.rules.apply('g_form.setDisplay("x", false)'),
            'ele.utilitiesService.toggleFieldMode(ele, "x", '
            'false === true ? "nonMandatory" : false === false ? "hide" : false)',
        )
        self.assertEqual(
            self.rules.apply('g_form.setVisible("x", show)'),
            'setFieldVisibility("x", show)',
        )

    def test_options_information_and_sections(self) -> None:
        self.assertEqual(
            self.rules.apply('g_form.addOption("state", "1", "Open")'),
            'addFieldOption("state", "1", "Open")',
        )
        self.assertEqual(self.rules.apply("g_form.clearOptions('state')"), 'clearFieldOptions("state")')
        self.assertEqual(self.rules.apply("g_form.getTableName()"), "tableName")
        self.assertEqual(self.rules.apply("g_form.getUniqueValue()"), "uniqueValue")
        self.assertEqual(self.rules.apply("g_form.isNewRecord()"), "isNewRecord")
        self.assertEqual(
            self.rules.apply('g_form.getReference("caller_id", setCaller)'),
            'getFieldReference("caller_id", setCaller)',
        )
        self.assertEqual(self.rules.apply('g_form.getControl("state")'), 'getFieldControl("state")')
        self.assertEqual(self.rules.apply("g_form.getSectionNames()"), "getSectionNames()")
        self.assertEqual(
            self.rules.apply('g_form.setSectionDisplay("notes", false)'),
            'setSectionVisibility("notes", false)',
        )

    def test_raw_identifier_is_used_verbatim(self) -> None:
        rules = build_form_rules("mainFormGroup")
        self.assertEqual(
            rules.apply('g_form.getValue("a")'),
            'ele.mainFormGroup.get("a").value',
        )

    def test_field_names_are_ascii_identifiers(self) -> None:
        source = 'g_form.setValue("prioridad_é", 1)'
        self.assertEqual(self.rules.apply(source), source)
        self.assertEqual(FALLBACK_RULES.apply(source), '// g_form.setValue("prioridad_é", 1)')
        self.assertEqual(
            self.rules.apply('g_form.clearValue("u_sub-category")'),
            'ele.modifiedFields.get("u_sub-category").setValue("")',
        )

    def test_whitespace_still_matches_non_breaking_space(self) -> None:
        self.assertEqual(
            self.rules.apply('g_form.setValue("state",\u00a01)'),
            'ele.modifiedFields.get("state").setValue(1)',
        )


class FallbackAndCleanupRuleTests(unittest.TestCase):
    def test_leftover_calls_are_commented_with_case_preserved(self) -> None:
        self.assertEqual(
            FALLBACK_RULES.apply('g_form.flash("state", "#FFFACD", 0)'),
            '// g_form.flash("state", "#FFFACD", 0)',
        )
        self.assertEqual(FALLBACK_RULES.apply("gs.eventQueue(e)"), "// gs.eventQueue(e)")

    def test_cleanup_strips_trailing_semicolons(self) -> None:
        self.assertEqual(CLEANUP_RULES.apply("a = 1;\nb();  \nc"), "a = 1\nb()\nc")

    def test_cleanup_is_idempotent(self) -> None:
        cases = {
            "x = 1;\nif (x) {\n  y();\n}": "x = 1\nif (x) {\n  y()\n}",
            # ;\s*$ may run across blank lines up to the last end of line
            "a = 1;   \n\n\nb();\t\n": "a = 1\nb()",
            "x;\n    \n  y;  ": "x\n  y",
            "z();\r\nw();": "z()\nw()",
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                once = CLEANUP_RULES.apply(source)
                self.assertEqual(once, expected)
                self.assertEqual(CLEANUP_RULES.apply(once), once)

    def test_fixed_group_order(self) -> None:
        names = [group.name for group in fixed_rule_groups()]
        self.assertEqual(names, ["systemApi", "alert", "record"])

    def test_malformed_pattern_fails_at_build_time(self) -> None:
        with self.assertRaises(re.error):
            rule(r"g_form\.(", "x")


if __name__ == "__main__":
    unittest.main()

"""
Rewrite rule catalog for Glide Script to Wolken JS conversion.

Rules are grouped and applied in a fixed order:

    System API (gs) -> alert -> record objects -> form API (g_form)
    -> fallback neutralization -> cosmetic cleanup

Identifier classes are spelled [A-Za-z0-9_] rather than \\w, which would also
match non-ASCII letters in field and table names.

Order matters: later rules see text already rewritten by earlier ones, so the
generic fallback rules must stay after every specific g_form/gs rule.

Every fixed group is compiled once at import. The form API group depends on
the selected form type and is rebuilt by build_form_rules() per conversion.
"""
import re
from typing import Tuple

from .types import FormType, FormTypeLike, RewriteRule, RuleGroup


def rule(pattern: str, replacement: str, flags: int = 0) -> RewriteRule:
    """
    Compile a rewrite rule.

    Raises re.error for a malformed pattern, which surfaces at import time
    for the fixed groups.
    """
    return RewriteRule(re.compile(pattern, flags), replacement)


# ============ ServiceNow System API (gs) ============

SYSTEM_API_RULES = RuleGroup("systemApi", (
    # Logging
    rule(r"gs\.(log|info|error)\s*\(", "console.log("),

    # User and session
    rule(r"gs\.getUser\(\)", "ele.currentUser"),
    rule(r"gs\.getSession\(\)", "ele.session"),
    rule(r"gs\.getProperty\([\"']([^\"']+)[\"']\)", r'ele.getProperty("\1")'),

    # Notifications
    rule(r"gs\.addInfoMessage\s*\(([^)]+)\);?", r'ele.showNotification("info", \1)'),
    rule(r"gs\.addErrorMessage\s*\(([^)]+)\);?", r'ele.showNotification("error", \1)'),
    rule(r"gs\.addWarningMessage\s*\(([^)]+)\);?", r'ele.showNotification("warning", \1)'),

    # Validation, expanded inline so the target runtime needs no helpers
    rule(r"gs\.nil\(([^)]+)\)", r'!\1 || \1 === "" || \1 === null || \1 === undefined'),
    rule(r"gs\.isValid\(([^)]+)\)", r'\1 && \1 !== "" && \1 !== null && \1 !== undefined'),
))


# ============ Alerts ============

ALERT_RULES = RuleGroup("alert", (
    rule(r"alert\s*\(([^)]+)\)", r"ele.messageSnackbarService.showMessageSnackBar(\1)"),
))


# ============ Record objects ============

RECORD_RULES = RuleGroup("record", (
    rule(r"current\.([A-Za-z0-9_]+)", r'ele.current["\1"]'),
    rule(r"workflow\.([A-Za-z0-9_]+)", r'ele.workflow["\1"]'),
    # Wolken has no GlideRecord; the replacement service call is app specific
    rule(
        r"var\s+([A-Za-z0-9_]+)\s*=\s*new\s+GlideRecord\([\"']([A-Za-z0-9_]+)[\"']\);?",
        r"// \1 = GlideRecord for \2 - use Angular service instead",
    ),
))


# ============ Form API (g_form) ============

def build_form_rules(form_type: FormTypeLike) -> RuleGroup:
    """
    Build the g_form rule group for a form type.

    The form type identifier is substituted verbatim into the replacement
    templates, so every field accessor is rooted at ele.<formType>.

    Args:
        form_type: FormType member or its raw identifier

    Returns:
        RuleGroup addressing the given form
    """
    form = form_type.value if isinstance(form_type, FormType) else str(form_type)
    # Escape template backslashes so the identifier lands in the output as given
    form = form.replace("\\", "\\\\")

    return RuleGroup(f"formApi:{form}", (
        # Field values
        rule(r"g_form\.getValue\s*\(\s*[\"']([^\"']+)[\"']\s*\)", rf'ele.{form}.get("\1").value'),
        rule(r"g_form\.setValue\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^\)]+)\)", rf'ele.{form}.get("\1").setValue(\2)'),
        rule(r"g_form\.patchValue\(([^)]+)\)", rf"ele.{form}.patchValue(\1)"),
        rule(r"g_form\.clearValue\([\"']([A-Za-z0-9_-]+)[\"']\)", rf'ele.{form}.get("\1").setValue("")'),

        # Read-only; the flag argument is matched but not carried over
        rule(r"g_form\.setReadOnly\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^\)]+)\)", rf'ele.{form}.get("\1").disable()'),

        # Field messages
        rule(r"g_form\.showFieldMsg\(([^,]+),([^,]+),([^\)]+)\)", r"ele.showFieldMessage(\1, \2, \3)"),
        rule(r"g_form\.hideFieldMsg\(([^\)]+)\)", r"ele.hideFieldMessage(\1)"),

        # Field modes
        rule(
            r"g_form\.setMandatory\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^\)]+)\)",
            r'ele.utilitiesService.toggleFieldMode(ele, "\1", \2 ? "mandatory" : "nonMandatory")',
        ),
        rule(r"g_form\.setVisible\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^\)]+)\)", r'setFieldVisibility("\1", \2)'),
        rule(
            r"g_form\.setDisplay\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^\)]+)\)",
            r'ele.utilitiesService.toggleFieldMode(ele, "\1", '
            r'\2 === true ? "nonMandatory" : \2 === false ? "hide" : \2)',
        ),

        # Options
        rule(r"g_form\.addOption\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^,]+),\s*([^\)]+)\)", r'addFieldOption("\1", \2, \3)'),
        rule(r"g_form\.clearOptions\([\"']([A-Za-z0-9_-]+)[\"']\)", r'clearFieldOptions("\1")'),

        # Form information
        rule(r"g_form\.getTableName\(\)", "tableName"),
        rule(r"g_form\.getUniqueValue\(\)", "uniqueValue"),
        rule(r"g_form\.isNewRecord\(\)", "isNewRecord"),
        rule(r"g_form\.getReference\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^\)]+)\)", r'getFieldReference("\1", \2)'),
        rule(r"g_form\.getControl\([\"']([A-Za-z0-9_-]+)[\"']\)", r'getFieldControl("\1")'),

        # Sections
        rule(r"g_form\.getSectionNames\(\)", "getSectionNames()"),
        rule(r"g_form\.setSectionDisplay\([\"']([A-Za-z0-9_-]+)[\"'],\s*([^\)]+)\)", r'setSectionVisibility("\1", \2)'),
    ))


# ============ Fallback and cleanup ============

# Anything left in either namespace had no specific rule; keep it, commented
FALLBACK_RULES = RuleGroup("fallback", (
    rule(r"g_form\.([a-zA-Z]+)\(", r"// g_form.\1("),
    rule(r"gs\.([a-zA-Z]+)\(", r"// gs.\1("),
))

CLEANUP_RULES = RuleGroup("cleanup", (
    rule(r";\s*$", "", re.MULTILINE),
))


def fixed_rule_groups() -> Tuple[RuleGroup, ...]:
    """Groups applied before the form API group, in order."""
    return (SYSTEM_API_RULES, ALERT_RULES, RECORD_RULES)

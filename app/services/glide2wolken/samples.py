"""Sample Glide Script for trying out the converter"""

SAMPLE_GLIDE_SCRIPT = """function onChange(control, oldValue, newValue, isLoading) {
    if (g_form.getValue("category") === "hardware") {
        g_form.setValue("priority", "high");
        gs.addInfoMessage("Priority set to high for hardware issues");
    }
    
    if (g_form.getValue("urgency") === "1") {
        g_form.setValue("priority", "critical");
        gs.addWarningMessage("Critical priority set for high urgency");
    }
}"""


def get_sample_glide_script() -> str:
    """Return the fixed onChange client script example."""
    return SAMPLE_GLIDE_SCRIPT

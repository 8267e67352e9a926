from medcalc.prompts import build_advice_prompt, build_calculator_context
from medcalc.registry import REGISTRY


def test_context_lists_full_catalog_in_order():
    lines = build_calculator_context(REGISTRY.all()).split("\n")
    assert len(lines) == len(REGISTRY)
    assert lines[0] == (
        "- Standard Dose (Ordered/On-Hand) (Dose Calc): "
        "Calculates volume (mL) to administer based on ordered dose and concentration."
    )
    assert lines[-1] == "- CURB-65 Severity Score (CURB-65): Predicts mortality in community-acquired pneumonia."


def test_context_of_empty_catalog():
    assert build_calculator_context([]) == ""


def test_prompt_embeds_context_and_query():
    prompt = build_advice_prompt("Burn on leg, 70kg", REGISTRY.all())
    assert "Tools Available:\n- Standard Dose" in prompt
    assert '"Burn on leg, 70kg"' in prompt
    assert "- Parkland Formula (Burns) (Parkland): " in prompt

"""
Calculator catalog for MedCalc.
Every clinical tool as a pure ``run_*`` function plus its declarative input list.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional, Sequence, Tuple

from .models import CalculatorDefinition, Choice, FieldDefinition, FieldKind, Result, Specialty


# ── Numeric helpers ──────────────────────────────────────────────────────────
# Results surface IEEE artifacts (Infinity, NaN) instead of raising, so the
# arithmetic that Python would reject goes through these.

def _div(num: float, den: float) -> float:
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _sqrt(x: float) -> float:
    return math.nan if x < 0 else math.sqrt(x)


def _ln(x: float) -> float:
    """Natural log with non-positive (and NaN) inputs read as 1."""
    return math.log(x if x > 0 else 1)


def _floor(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    return float(math.floor(x))


def _round(x: float) -> float:
    """Round to the nearest integer, ties toward +infinity."""
    if math.isnan(x) or math.isinf(x):
        return x
    r = math.floor(x)
    if x - r >= 0.5:
        r += 1
    return float(r)


def _num(x: float) -> str:
    """
    Shortest display form of a number: 3, 4.5, 1e-7, Infinity, NaN.

    Digits come from ``repr``; plain notation covers 1e-6 up to 1e21, the
    rest uses exponent form without zero padding ("1e-7", "1e+21").
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    sign = "-" if x < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # decimal point position relative to the first digit
    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    e = n - 1
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _fixed(x: float, digits: int) -> str:
    """Format with a fixed number of decimals, halves rounded away from zero."""
    if math.isnan(x) or math.isinf(x) or abs(x) >= 1e21:
        return _num(x)
    if x == 0:
        x = 0.0  # drop the sign of -0.0
    q = Decimal(x).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{q:f}"


def _band(x: float, bands: Sequence[Tuple[float, str]], default: str) -> str:
    """First label whose upper bound (inclusive) holds ``x``."""
    for upper, label in bands:
        if x <= upper:
            return label
    return default


# ── Pharmacology: dispensing ─────────────────────────────────────────────────

# 1. Standard Dose ────────────────────────────────────────────────────────────
def run_standard_dose(v: Dict[str, float]) -> Result:
    amount = _div(v["desired"], v["have"]) * v["volume"]
    return Result(value=_fixed(amount, 2), unit="mL", interpretation="Volume to dispense/administer.")


# 2. Weight-Based Dosing ──────────────────────────────────────────────────────
def run_weight_dose(v: Dict[str, float]) -> Result:
    total = v["weight"] * v["dose_per_kg"]
    return Result(value=_fixed(total, 1), unit="mg", interpretation="Total calculated dose.")


# 3. BSA-Based Dosing ─────────────────────────────────────────────────────────
def run_bsa_dose(v: Dict[str, float]) -> Result:
    total = v["bsa"] * v["dose_per_m2"]
    return Result(value=_fixed(total, 1), unit="mg", interpretation="Total calculated dose.")


# 4. Infusion Flow Rate ───────────────────────────────────────────────────────
def run_infusion_rate(v: Dict[str, float]) -> Result:
    rate = _div(v["volume"], v["time"])
    return Result(value=_fixed(rate, 1), unit="mL/hr")


# 5. mcg/kg/min Infusion ──────────────────────────────────────────────────────
def run_mcg_kg_min(v: Dict[str, float]) -> Result:
    # (mcg/kg/min * kg * 60 min/hr) / (mg/mL * 1000 mcg/mg)
    rate = _div(v["dose"] * v["weight"] * 60, v["conc"] * 1000)
    return Result(value=_fixed(rate, 1), unit="mL/hr")


# 6. Dilution (C1V1 = C2V2) ───────────────────────────────────────────────────
def run_dilution(v: Dict[str, float]) -> Result:
    v1 = _div(v["c2"] * v["v2"], v["c1"])
    return Result(
        value=_fixed(v1, 2),
        unit="mL",
        interpretation=f"Use {_fixed(v1, 2)}mL of stock and add {_fixed(v['v2'] - v1, 2)}mL diluent.",
    )


# 7. Alligation Alternate ─────────────────────────────────────────────────────
def run_alligation(v: Dict[str, float]) -> Result:
    high_parts = v["target"] - v["low"]
    low_parts = v["high"] - v["target"]
    total_parts = high_parts + low_parts
    vol_high = _div(high_parts, total_parts) * v["total"]
    vol_low = _div(low_parts, total_parts) * v["total"]
    return Result(
        value=_fixed(vol_high, 1),
        unit="mL High",
        interpretation=(
            f"Mix {_fixed(vol_high, 1)}mL of {_num(v['high'])}% "
            f"with {_fixed(vol_low, 1)}mL of {_num(v['low'])}%"
        ),
    )


# 8. Reconstitution Displacement ──────────────────────────────────────────────
def run_powder_displacement(v: Dict[str, float]) -> Result:
    displacement = v["total_v"] - v["diluent_v"]
    return Result(value=_fixed(displacement, 2), unit="mL", interpretation="Volume of the medication powder itself.")


# 9. Morphine Milligram Equivalents ───────────────────────────────────────────
MME_FACTORS: Tuple[Tuple[str, float], ...] = (
    ("Morphine (1.0)", 1.0),
    ("Oxycodone (1.5)", 1.5),
    ("Hydrocodone (1.0)", 1.0),
    ("Hydromorphone (4.0)", 4.0),
    ("Codeine (0.15)", 0.15),
    ("Methadone (4.0)", 4.0),
)


def run_mme(v: Dict[str, float]) -> Result:
    mme = v["drug"] * v["dose"]
    return Result(
        value=_fixed(mme, 1),
        unit="MME/day",
        interpretation="High Risk (>50 MME)" if mme >= 50 else "Lower Risk",
    )


# 10. Remaining Infusion Time ─────────────────────────────────────────────────
def run_remaining_time(v: Dict[str, float]) -> Result:
    exact = _div(v["volume"], v["rate"])
    hours = _floor(exact)
    minutes = _round((exact - hours) * 60)
    return Result(
        value=f"{_num(hours)}h {_num(minutes)}m",
        unit="remaining",
        interpretation="Estimated time until bag empty.",
    )


# ── Body measurements ────────────────────────────────────────────────────────

# 11. BMI ─────────────────────────────────────────────────────────────────────
def run_bmi(v: Dict[str, float]) -> Result:
    ht_m = v["height"] / 100
    bmi = _div(v["weight"], ht_m * ht_m)
    interpretation = "Normal"
    if bmi < 18.5:
        interpretation = "Underweight"
    elif 25 <= bmi < 30:
        interpretation = "Overweight"
    elif bmi >= 30:
        interpretation = "Obese"
    return Result(value=_fixed(bmi, 1), unit="kg/m²", interpretation=interpretation)


# 12. BSA (Mosteller) ─────────────────────────────────────────────────────────
def run_bsa(v: Dict[str, float]) -> Result:
    bsa = _sqrt((v["height"] * v["weight"]) / 3600)
    return Result(value=_fixed(bsa, 2), unit="m²")


# ── Electrolytes and gases ───────────────────────────────────────────────────

# 13. Corrected Sodium ────────────────────────────────────────────────────────
def run_corrected_sodium(v: Dict[str, float]) -> Result:
    # Katz coefficient: 1.6 mEq/L per 100 mg/dL glucose above 100
    corrected = v["na"] + 0.016 * (v["glu"] - 100)
    return Result(value=_fixed(corrected, 1), unit="mEq/L")


# 14. A-a Gradient ────────────────────────────────────────────────────────────
def run_aa_gradient(v: Dict[str, float]) -> Result:
    pio2 = (v["fio2"] / 100) * 713  # sea level, 37°C
    pao2_alveolar = pio2 - (v["paco2"] / 0.8)
    gradient = pao2_alveolar - v["pao2"]
    return Result(
        value=_fixed(gradient, 1),
        unit="mmHg",
        interpretation="High Gradient" if gradient > 15 else "Normal Gradient",
    )


# 15. FeUrea ──────────────────────────────────────────────────────────────────
def run_fe_urea(v: Dict[str, float]) -> Result:
    feurea = _div(v["uurea"] * v["scr"], v["surea"] * v["ucr"]) * 100
    return Result(
        value=_fixed(feurea, 1),
        unit="%",
        interpretation="Prerenal" if feurea < 35 else "Intrinsic",
    )


# ── Point scores ─────────────────────────────────────────────────────────────

def _points(v: Dict[str, float], keys: Sequence[str]) -> float:
    return sum(v[k] for k in keys)


# 16. HAS-BLED ────────────────────────────────────────────────────────────────
def run_has_bled(v: Dict[str, float]) -> Result:
    score = _points(v, ("h", "a", "s", "b", "l", "e", "d"))
    return Result(
        value=_num(score),
        unit="Points",
        interpretation="High Risk" if score >= 3 else "Low/Moderate Risk",
    )


# 17. BISAP ───────────────────────────────────────────────────────────────────
def run_bisap(v: Dict[str, float]) -> Result:
    score = _points(v, ("bun", "ment", "sirs", "age", "eff"))
    return Result(
        value=_num(score),
        unit="Points",
        interpretation="High Mortality Risk" if score >= 3 else "Lower Risk",
    )


# 18. Corrected Phenytoin (Winter-Tozer) ──────────────────────────────────────
def run_corrected_phenytoin(v: Dict[str, float]) -> Result:
    corrected = _div(v["p"], 0.2 * v["a"] + 0.1)
    return Result(value=_fixed(corrected, 1), unit="mcg/mL")


# 19. HEART Score ─────────────────────────────────────────────────────────────
def run_heart_score(v: Dict[str, float]) -> Result:
    score = _points(v, ("h", "e", "a", "r", "t"))
    interpretation = "Low Risk (Discharge possible)"
    if score >= 7:
        interpretation = "High Risk (Consider early invasive)"
    elif score >= 4:
        interpretation = "Moderate Risk (Observe/Test)"
    return Result(value=_num(score), unit="Points", interpretation=interpretation)


# 20. Centor (McIsaac age adjustment) ─────────────────────────────────────────
def run_centor(v: Dict[str, float]) -> Result:
    score = _points(v, ("f", "e", "n", "c", "a"))
    return Result(
        value=_num(score),
        unit="Points",
        interpretation="Suggests Antibiotics" if score >= 4 else "Likely Viral",
    )


# 21. MELD ────────────────────────────────────────────────────────────────────
def run_meld(v: Dict[str, float]) -> Result:
    meld = 3.78 * _ln(v["b"]) + 11.2 * _ln(v["i"]) + 9.57 * _ln(v["c"]) + 6.43
    return Result(value=_num(_round(meld)), unit="Score")


# ── General conversions ──────────────────────────────────────────────────────

# 22. Temperature Converter ───────────────────────────────────────────────────
CELSIUS = 1
FAHRENHEIT = 2


def run_temperature(v: Dict[str, float]) -> Result:
    temp = v["temp"]
    if v["scale"] == CELSIUS:
        result = (temp * 9 / 5) + 32
        return Result(value=_fixed(result, 1), unit="°F", interpretation=f"{_num(temp)}°C is {_fixed(result, 1)}°F")
    result = (temp - 32) * 5 / 9
    return Result(value=_fixed(result, 1), unit="°C", interpretation=f"{_num(temp)}°F is {_fixed(result, 1)}°C")


# 23. Ideal Body Weight (Devine) ──────────────────────────────────────────────
MALE = 1


def run_ideal_body_weight(v: Dict[str, float]) -> Result:
    ht_in = v["height"] / 2.54
    if v["sex"] == MALE:
        ibw = 50.0 + 2.3 * (ht_in - 60)
    else:
        ibw = 45.5 + 2.3 * (ht_in - 60)
    return Result(value=_fixed(ibw, 1), unit="kg")


# 24. BMR (Mifflin-St Jeor) ───────────────────────────────────────────────────
def run_bmr(v: Dict[str, float]) -> Result:
    # sex carries the constant directly: +5 male, -161 female
    bmr = (10 * v["weight"]) + (6.25 * v["height"]) - (5 * v["age"]) + v["sex"]
    return Result(value=_num(_round(bmr)), unit="kcal/day", interpretation="Total energy expenditure at rest.")


# ── Haemodynamics and renal ──────────────────────────────────────────────────

# 25. Mean Arterial Pressure ──────────────────────────────────────────────────
def run_mean_arterial_pressure(v: Dict[str, float]) -> Result:
    pressure = (v["sbp"] + 2 * v["dbp"]) / 3
    return Result(
        value=_fixed(pressure, 0),
        unit="mmHg",
        interpretation="Low (Danger)" if pressure < 65 else "Normal",
    )


# 26. FENa ────────────────────────────────────────────────────────────────────
def run_fena(v: Dict[str, float]) -> Result:
    fena = _div(v["una"] * v["pcr"], v["pna"] * v["ucr"]) * 100
    interpretation = "Intrinsic Renal Failure"
    if fena < 1:
        interpretation = "Prerenal (Dehydration)"
    elif fena > 2:
        interpretation = "Intrinsic (ATN)"
    return Result(value=_fixed(fena, 2), unit="%", interpretation=interpretation)


# 27. Free Water Deficit ──────────────────────────────────────────────────────
def run_free_water_deficit(v: Dict[str, float]) -> Result:
    # sex carries the total-body-water fraction
    deficit = v["sex"] * v["weight"] * (v["nas"] / 140 - 1)
    return Result(
        value=_fixed(deficit, 1),
        unit="Liters",
        interpretation="Free water required to reach Na 140 mEq/L.",
    )


# 28. Corrected Calcium ───────────────────────────────────────────────────────
def run_corrected_calcium(v: Dict[str, float]) -> Result:
    corrected = v["ca"] + 0.8 * (4.0 - v["alb"])
    if corrected > 10.5:
        interpretation = "Hypercalcemia"
    elif corrected < 8.5:
        interpretation = "Hypocalcemia"
    else:
        interpretation = "Normal"
    return Result(value=_fixed(corrected, 1), unit="mg/dL", interpretation=interpretation)


# 29. LDL (Friedewald) ────────────────────────────────────────────────────────
def run_ldl(v: Dict[str, float]) -> Result:
    ldl = v["tc"] - v["hdl"] - (v["tg"] / 5)
    if ldl > 160:
        interpretation = "High"
    elif ldl < 100:
        interpretation = "Optimal"
    else:
        interpretation = "Near Optimal"
    return Result(value=_fixed(ldl, 0), unit="mg/dL", interpretation=interpretation)


# 30. SIRS ────────────────────────────────────────────────────────────────────
def run_sirs(v: Dict[str, float]) -> Result:
    score = _points(v, ("temp", "hr", "rr", "wbc"))
    return Result(
        value=_num(score),
        unit="/4",
        interpretation="SIRS Positive" if score >= 2 else "SIRS Negative",
    )


# 31. P/F Ratio ───────────────────────────────────────────────────────────────
def run_pf_ratio(v: Dict[str, float]) -> Result:
    ratio = _div(v["pao2"], v["fio2"] / 100)
    interpretation = _band(
        ratio,
        ((100, "Severe ARDS"), (200, "Moderate ARDS"), (300, "Mild ARDS")),
        "Normal",
    )
    return Result(value=_num(_round(ratio)), unit="mmHg", interpretation=interpretation)


# 32. Bicarbonate Deficit ─────────────────────────────────────────────────────
def run_bicarbonate_deficit(v: Dict[str, float]) -> Result:
    deficit = 0.4 * v["weight"] * (v["target"] - v["actual"])
    return Result(value=_fixed(deficit, 0), unit="mEq", interpretation="Total bicarbonate deficit.")


# 33. Creatinine Clearance (Cockcroft-Gault) ──────────────────────────────────
def run_creatinine_clearance(v: Dict[str, float]) -> Result:
    # sex carries the multiplier: 1 male, 0.85 female
    crcl = _div((140 - v["age"]) * v["weight"], 72 * v["creatinine"]) * v["sex"]
    return Result(value=_fixed(crcl, 1), unit="mL/min")


# 34. qSOFA ───────────────────────────────────────────────────────────────────
def run_qsofa(v: Dict[str, float]) -> Result:
    score = _points(v, ("rr", "ment", "sbp"))
    return Result(
        value=_num(score),
        unit="/3",
        interpretation="High risk for poor outcome" if score >= 2 else "Low risk",
    )


# 35. QTc (Bazett) ────────────────────────────────────────────────────────────
def run_qtc_bazett(v: Dict[str, float]) -> Result:
    rr = _div(60, v["hr"])
    qtc = _div(v["qt"], _sqrt(rr))
    return Result(
        value=_fixed(qtc, 0),
        unit="ms",
        interpretation="Prolonged (Male >440, Female >460)" if qtc > 440 else "Normal",
    )


# 36. CHA2DS2-VASc ────────────────────────────────────────────────────────────
def run_cha2ds2_vasc(v: Dict[str, float]) -> Result:
    score = _points(v, ("age", "sex", "chf", "htn", "stroke", "vasc", "dm"))
    return Result(
        value=_num(score),
        unit="Points",
        interpretation="Anticoagulation recommended" if score >= 2 else "Low/Moderate risk",
    )


# 37. Anion Gap ───────────────────────────────────────────────────────────────
def run_anion_gap(v: Dict[str, float]) -> Result:
    gap = v["na"] - (v["cl"] + v["hco3"])
    return Result(
        value=_fixed(gap, 1),
        unit="mEq/L",
        interpretation="High Anion Gap" if gap > 12 else "Normal (8-12)",
    )


# 38. Absolute Neutrophil Count ───────────────────────────────────────────────
def run_anc(v: Dict[str, float]) -> Result:
    anc = v["wbc"] * ((v["polys"] + v["bands"]) / 100)
    interpretation = "Normal"
    if anc < 500:
        interpretation = "Severe Neutropenia"
    elif anc < 1000:
        interpretation = "Moderate Neutropenia"
    elif anc < 1500:
        interpretation = "Mild Neutropenia"
    return Result(value=_num(_round(anc)), unit="cells/µL", interpretation=interpretation)


# 39. IV Drip Rate ────────────────────────────────────────────────────────────
def run_drip_rate(v: Dict[str, float]) -> Result:
    rate = _div(v["volume"] * v["factor"], v["time"])
    return Result(value=_fixed(rate, 0), unit="gtt/min")


# ── Pediatrics and resuscitation ─────────────────────────────────────────────

# 40. Maintenance Fluids (4-2-1) ──────────────────────────────────────────────
def run_maintenance_fluids(v: Dict[str, float]) -> Result:
    wt = v["weight"]
    if wt <= 10:
        rate = wt * 4
    elif wt <= 20:
        rate = 40 + (wt - 10) * 2
    else:
        rate = 60 + (wt - 20) * 1
    return Result(value=_fixed(rate, 0), unit="mL/hr")


# 41. APGAR ───────────────────────────────────────────────────────────────────
def run_apgar(v: Dict[str, float]) -> Result:
    score = _points(v, ("hr", "resp", "tone", "grim", "color"))
    interpretation = _band(score, ((3, "Critically low"), (6, "Fairly low")), "Excellent condition")
    return Result(value=_num(score), unit="/10", interpretation=interpretation)


# 42. Parkland Formula ────────────────────────────────────────────────────────
def run_parkland(v: Dict[str, float]) -> Result:
    total = 4 * v["weight"] * v["tbsa"]
    return Result(
        value=_fixed(total, 0),
        unit="mL (Total 24h)",
        interpretation=f"Give {_num(_round(total / 2))} mL in first 8h.",
    )


# 43. Glasgow Coma Scale ──────────────────────────────────────────────────────
def run_gcs(v: Dict[str, float]) -> Result:
    score = _points(v, ("eye", "verbal", "motor"))
    interpretation = "Severe Injury (GCS 3-8)"
    if score >= 13:
        interpretation = "Mild Injury"
    elif score >= 9:
        interpretation = "Moderate Injury"
    return Result(value=_num(score), unit="/15", interpretation=interpretation)


# 44. Wells' Criteria for PE ──────────────────────────────────────────────────
def run_wells_pe(v: Dict[str, float]) -> Result:
    score = _points(v, ("clin", "alt", "hr", "immob", "prev", "hemop", "malig"))
    return Result(
        value=_num(score),
        unit="Points",
        interpretation="PE Likely" if score > 4 else "PE Unlikely",
    )


# 45. CURB-65 ─────────────────────────────────────────────────────────────────
def run_curb65(v: Dict[str, float]) -> Result:
    score = _points(v, ("conf", "bun", "rr", "bp", "age"))
    interpretation = "Low risk (Outpatient)"
    if score >= 3:
        interpretation = "High risk (Urgent hospitalize)"
    elif score >= 2:
        interpretation = "Moderate risk (Hospitalize)"
    return Result(value=_num(score), unit="Points", interpretation=interpretation)


# ── Input builders ───────────────────────────────────────────────────────────

def _number(field_id: str, label: str, unit: str = "", default: Optional[float] = None) -> FieldDefinition:
    return FieldDefinition(id=field_id, label=label, unit=unit, default_value=default)


def _select(field_id: str, label: str, options: Sequence[Tuple[str, float]]) -> FieldDefinition:
    return FieldDefinition(
        id=field_id,
        label=label,
        kind=FieldKind.CHOICE,
        choices=tuple(Choice(label=lbl, value=val) for lbl, val in options),
    )


def _yes_no(field_id: str, label: str, yes: float = 1) -> FieldDefinition:
    return _select(field_id, label, (("No", 0), ("Yes", yes)))


_NONE_ONE_BOTH = (("None", 0), ("One", 1), ("Both", 2))
_SEX_MALE_FEMALE = (("Male", 1), ("Female", 2))


def _calc(calc_id: str, name: str, short_name: str, specialty: Specialty,
          description: str, inputs: Sequence[FieldDefinition], run_fn) -> CalculatorDefinition:
    return CalculatorDefinition(
        id=calc_id,
        name=name,
        short_name=short_name,
        specialty=specialty,
        description=description,
        inputs=tuple(inputs),
        compute=run_fn,
    )


# ── Calculator catalog ───────────────────────────────────────────────────────
# Display order. One canonical definition per calculator id.

CALCULATORS: Tuple[CalculatorDefinition, ...] = (
    _calc("standard-dose", "Standard Dose (Ordered/On-Hand)", "Dose Calc", Specialty.PHARMACOLOGY,
          "Calculates volume (mL) to administer based on ordered dose and concentration.",
          [_number("desired", "Ordered Dose", "mg"),
           _number("have", "On-Hand Dose", "mg"),
           _number("volume", "On-Hand Volume", "mL")],
          run_standard_dose),
    _calc("weight-dose", "Weight-Based Dosing (mg/kg)", "mg/kg Dose", Specialty.PHARMACOLOGY,
          "Calculates total dose based on patient weight and mg/kg order.",
          [_number("weight", "Patient Weight", "kg"),
           _number("dose_per_kg", "Ordered Dose", "mg/kg")],
          run_weight_dose),
    _calc("bsa-dose", "BSA-Based Dosing (mg/m²)", "mg/m² Dose", Specialty.PHARMACOLOGY,
          "Calculates total dose based on Body Surface Area (BSA).",
          [_number("bsa", "Patient BSA", "m²"),
           _number("dose_per_m2", "Ordered Dose", "mg/m²")],
          run_bsa_dose),
    _calc("infusion-rate", "Infusion Flow Rate", "mL/hr Rate", Specialty.PHARMACOLOGY,
          "Calculates the mL/hr rate for an IV pump.",
          [_number("volume", "Total Volume", "mL"),
           _number("time", "Time (hours)", "hr")],
          run_infusion_rate),
    _calc("mcg-kg-min", "mcg/kg/min Infusion", "mcg/kg/min", Specialty.CRITICAL_CARE,
          "Calculates infusion rate for continuous vasoactive drips.",
          [_number("dose", "Desired Dose", "mcg/kg/min"),
           _number("weight", "Weight", "kg"),
           _number("conc", "Concentration", "mg/mL")],
          run_mcg_kg_min),
    _calc("dilution-v1", "Dilution Formula (C1V1 = C2V2)", "Dilution", Specialty.PHARMACOLOGY,
          "Calculate volume of stock solution needed for a specific dilution.",
          [_number("c2", "Desired Concentration", "%"),
           _number("v2", "Desired Volume", "mL"),
           _number("c1", "Stock Concentration", "%")],
          run_dilution),
    _calc("alligation", "Alligation Alternate", "Alligation", Specialty.PHARMACOLOGY,
          "Mix two strengths to get an intermediate strength.",
          [_number("high", "Higher Concentration", "%"),
           _number("low", "Lower Concentration", "%"),
           _number("target", "Desired Concentration", "%"),
           _number("total", "Desired Total Volume", "mL")],
          run_alligation),
    _calc("powder-displace", "Reconstitution Displacement", "Recon", Specialty.PHARMACOLOGY,
          "Calculates the volume of powder displacement during reconstitution.",
          [_number("total_v", "Total Final Volume", "mL"),
           _number("diluent_v", "Diluent Added", "mL")],
          run_powder_displacement),
    _calc("mme-calc", "Narcotic Equivalence (MME)", "MME", Specialty.PHARMACOLOGY,
          "Morphine Milligram Equivalents for opioid risk assessment.",
          [_select("drug", "Opioid Type", MME_FACTORS),
           _number("dose", "Daily Dose", "mg")],
          run_mme),
    _calc("remaining-time", "Remaining Infusion Time", "Time Left", Specialty.PHARMACOLOGY,
          "Estimates how long until an IV bag is empty.",
          [_number("volume", "Remaining Volume", "mL"),
           _number("rate", "Current Rate", "mL/hr")],
          run_remaining_time),
    _calc("bmi", "Body Mass Index (BMI)", "BMI", Specialty.GENERAL,
          "Measures body fat based on height and weight.",
          [_number("weight", "Weight", "kg"),
           _number("height", "Height", "cm")],
          run_bmi),
    _calc("bsa", "Body Surface Area (Mosteller)", "BSA", Specialty.GENERAL,
          "Calculates BSA, commonly used for drug dosing in oncology.",
          [_number("height", "Height", "cm"),
           _number("weight", "Weight", "kg")],
          run_bsa),
    _calc("corr-na", "Corrected Sodium (Hyperglycemia)", "Corr Na", Specialty.EMERGENCY,
          "Adjusts serum sodium for the effects of hyperglycemia.",
          [_number("na", "Measured Sodium", "mEq/L"),
           _number("glu", "Serum Glucose", "mg/dL")],
          run_corrected_sodium),
    _calc("aa-grad", "Alveolar-arterial (A-a) Gradient", "A-a Gradient", Specialty.CRITICAL_CARE,
          "Helps identify the cause of hypoxia.",
          [_number("fio2", "FiO2", "%", default=21),
           _number("paco2", "PaCO2", "mmHg"),
           _number("pao2", "PaO2", "mmHg")],
          run_aa_gradient),
    _calc("fe-urea", "Fractional Excretion of Urea (FeUrea)", "FeUrea", Specialty.NEPHROLOGY,
          "Useful for AKI assessment when diuretics are present.",
          [_number("una", "Urinary Sodium", "mEq/L"),
           _number("uurea", "Urinary Urea", "mg/dL"),
           _number("surea", "Serum Urea", "mg/dL"),
           _number("ucr", "Urinary Creatinine", "mg/dL"),
           _number("scr", "Serum Creatinine", "mg/dL")],
          run_fe_urea),
    _calc("has-bled", "HAS-BLED Bleeding Risk", "HAS-BLED", Specialty.CARDIOLOGY,
          "Risk of major bleeding for AFib patients on anticoagulants.",
          [_yes_no("h", "Hypertension (SBP >160)"),
           _select("a", "Abnormal Renal/Liver Function", _NONE_ONE_BOTH),
           _yes_no("s", "Stroke History"),
           _yes_no("b", "Bleeding History or Predisposition"),
           _yes_no("l", "Labile INR"),
           _yes_no("e", "Elderly (Age >65)"),
           _select("d", "Drugs/Alcohol Use", _NONE_ONE_BOTH)],
          run_has_bled),
    _calc("bisap", "BISAP Score (Pancreatitis)", "BISAP", Specialty.GASTROENTEROLOGY,
          "Predicts mortality in acute pancreatitis.",
          [_yes_no("bun", "BUN >25 mg/dL"),
           _yes_no("ment", "Impaired Mental Status"),
           _yes_no("sirs", "SIRS Present"),
           _yes_no("age", "Age >60"),
           _yes_no("eff", "Pleural Effusion")],
          run_bisap),
    _calc("pheny-corr", "Corrected Phenytoin (Winter-Tozer)", "Corr Pheny", Specialty.PHARMACOLOGY,
          "Adjusts phenytoin levels for hypoalbuminemia.",
          [_number("p", "Measured Phenytoin", "mcg/mL"),
           _number("a", "Serum Albumin", "g/dL")],
          run_corrected_phenytoin),
    _calc("heart-score", "HEART Score for Chest Pain", "HEART", Specialty.EMERGENCY,
          "Predicts major adverse cardiac events.",
          [_select("h", "History (Suspicion)", (("Low", 0), ("Moderate", 1), ("High", 2))),
           _select("e", "ECG", (("Normal", 0), ("Non-specific", 1), ("ST-Depression", 2))),
           _select("a", "Age", (("<45", 0), ("45-64", 1), ("≥65", 2))),
           _select("r", "Risk Factors", (("None", 0), ("1-2", 1), ("≥3", 2))),
           _select("t", "Troponin", (("Normal", 0), ("1-3x Limit", 1), (">3x Limit", 2)))],
          run_heart_score),
    _calc("centor", "Centor Criteria (Strep Throat)", "Centor", Specialty.EMERGENCY,
          "Probability of bacterial vs. viral pharyngitis.",
          [_yes_no("f", "History of Fever"),
           _yes_no("e", "Tonsillar Exudates"),
           _yes_no("n", "Tender Ant. Cervical Nodes"),
           _yes_no("c", "Absence of Cough"),
           _select("a", "Age", (("15-44", 0), ("45+", -1), ("3-14", 1)))],
          run_centor),
    _calc("meld", "MELD Score (Liver)", "MELD", Specialty.GASTROENTEROLOGY,
          "Prognosis for patients with liver disease.",
          [_number("b", "Bilirubin", "mg/dL"),
           _number("i", "INR"),
           _number("c", "Creatinine", "mg/dL")],
          run_meld),
    _calc("temp-conv", "Temperature Converter", "Temp", Specialty.GENERAL,
          "Convert between Celsius and Fahrenheit.",
          [_number("temp", "Temperature", "Value"),
           _select("scale", "From Scale", (("Celsius (°C)", CELSIUS), ("Fahrenheit (°F)", FAHRENHEIT)))],
          run_temperature),
    _calc("ibw", "Ideal Body Weight (Devine)", "IBW", Specialty.GENERAL,
          "Estimates healthy weight based on height and gender.",
          [_number("height", "Height", "cm"),
           _select("sex", "Sex", _SEX_MALE_FEMALE)],
          run_ideal_body_weight),
    _calc("bmr", "Basal Metabolic Rate (Mifflin-St Jeor)", "BMR", Specialty.GENERAL,
          "Daily calories needed at rest.",
          [_number("weight", "Weight", "kg"),
           _number("height", "Height", "cm"),
           _number("age", "Age", "yrs"),
           _select("sex", "Sex", (("Male", 5), ("Female", -161)))],
          run_bmr),
    _calc("map", "Mean Arterial Pressure", "MAP", Specialty.CRITICAL_CARE,
          "Average arterial pressure during a single cardiac cycle.",
          [_number("sbp", "Systolic BP", "mmHg"),
           _number("dbp", "Diastolic BP", "mmHg")],
          run_mean_arterial_pressure),
    _calc("fena", "Fractional Excretion of Sodium (FeNa)", "FeNa", Specialty.NEPHROLOGY,
          "Differentiates between prerenal and intrinsic AKI.",
          [_number("una", "Urinary Sodium", "mEq/L"),
           _number("pna", "Plasma Sodium", "mEq/L"),
           _number("pcr", "Plasma Creatinine", "mg/dL"),
           _number("ucr", "Urinary Creatinine", "mg/dL")],
          run_fena),
    _calc("water-def", "Free Water Deficit", "Water Deficit", Specialty.NEPHROLOGY,
          "Calculates water needed to correct hypernatremia.",
          [_number("weight", "Weight", "kg"),
           _number("nas", "Serum Sodium", "mEq/L"),
           _select("sex", "Sex (Water %)", (("Male (0.6)", 0.6), ("Female (0.5)", 0.5)))],
          run_free_water_deficit),
    _calc("corr-calc", "Corrected Calcium", "Corr Ca", Specialty.GENERAL,
          "Adjusts calcium levels for patients with low albumin.",
          [_number("ca", "Serum Calcium", "mg/dL"),
           _number("alb", "Serum Albumin", "g/dL")],
          run_corrected_calcium),
    _calc("ldl", "LDL Cholesterol (Friedewald)", "LDL", Specialty.CARDIOLOGY,
          "Calculates LDL based on Total, HDL, and Triglycerides.",
          [_number("tc", "Total Cholesterol", "mg/dL"),
           _number("hdl", "HDL Cholesterol", "mg/dL"),
           _number("tg", "Triglycerides", "mg/dL")],
          run_ldl),
    _calc("sirs", "SIRS Criteria", "SIRS", Specialty.CRITICAL_CARE,
          "Systemic Inflammatory Response Syndrome criteria.",
          [_yes_no("temp", "Temp <36 or >38°C"),
           _yes_no("hr", "Heart Rate >90"),
           _yes_no("rr", "RR >20 or PaCO2 <32"),
           _yes_no("wbc", "WBC <4k, >12k or >10% bands")],
          run_sirs),
    _calc("pf-ratio", "PaO2/FiO2 Ratio", "P/F Ratio", Specialty.CRITICAL_CARE,
          "Assesses severity of respiratory failure (ALI/ARDS).",
          [_number("pao2", "PaO2", "mmHg"),
           _number("fio2", "FiO2 (%)", "%")],
          run_pf_ratio),
    _calc("bic-def", "Bicarbonate Deficit", "Bic Def", Specialty.CRITICAL_CARE,
          "Calculates amount of bicarbonate to correct acidosis.",
          [_number("weight", "Weight", "kg"),
           _number("target", "Target HCO3", "mEq/L", default=24),
           _number("actual", "Current HCO3", "mEq/L")],
          run_bicarbonate_deficit),
    _calc("crcl", "Creatinine Clearance (Cockcroft-Gault)", "CrCl", Specialty.NEPHROLOGY,
          "Estimation of GFR using Cockcroft-Gault equation.",
          [_number("age", "Age", "yrs"),
           _number("weight", "Weight", "kg"),
           _number("creatinine", "Serum Creatinine", "mg/dL"),
           _select("sex", "Sex", (("Male", 1), ("Female", 0.85)))],
          run_creatinine_clearance),
    _calc("qsofa", "qSOFA Score", "qSOFA", Specialty.CRITICAL_CARE,
          "Quick Sequential Organ Failure Assessment for sepsis risk.",
          [_yes_no("rr", "Resp Rate ≥22/min"),
           _yes_no("ment", "Altered Mentation (GCS <15)"),
           _yes_no("sbp", "Systolic BP ≤100 mmHg")],
          run_qsofa),
    _calc("qtc", "Corrected QT Interval (Bazett)", "QTc", Specialty.CARDIOLOGY,
          "Adjusts QT interval for heart rate to assess arrhythmia risk.",
          [_number("qt", "QT Interval", "ms"),
           _number("hr", "Heart Rate", "bpm")],
          run_qtc_bazett),
    _calc("chads", "CHA2DS2-VASc Score", "CHA2DS2", Specialty.CARDIOLOGY,
          "Stroke risk for patients with Atrial Fibrillation.",
          [_select("age", "Age", (("<65", 0), ("65-74", 1), ("≥75", 2))),
           _select("sex", "Sex", (("Male", 0), ("Female", 1))),
           _yes_no("chf", "CHF History"),
           _yes_no("htn", "Hypertension History"),
           _yes_no("stroke", "Stroke/TIA History", yes=2),
           _yes_no("vasc", "Vascular Disease History"),
           _yes_no("dm", "Diabetes History")],
          run_cha2ds2_vasc),
    _calc("anion-gap", "Anion Gap", "AG", Specialty.CRITICAL_CARE,
          "Calculates the gap between primary measured cations and anions.",
          [_number("na", "Sodium (Na)", "mEq/L"),
           _number("cl", "Chloride (Cl)", "mEq/L"),
           _number("hco3", "Bicarbonate (HCO3)", "mEq/L")],
          run_anion_gap),
    _calc("anc", "Absolute Neutrophil Count", "ANC", Specialty.GENERAL,
          "Assesses infection risk in neutropenic patients.",
          [_number("wbc", "WBC Count", "cells/µL"),
           _number("polys", "Neutrophils/Polys (%)", "%"),
           _number("bands", "Bands (%)", "%")],
          run_anc),
    _calc("drip-rate", "IV Drip Rate", "Drip Rate", Specialty.PHARMACOLOGY,
          "Calculate drops per minute for IV infusions.",
          [_number("volume", "Total Volume", "mL"),
           _number("time", "Time", "min"),
           _number("factor", "Drop Factor", "gtt/mL", default=20)],
          run_drip_rate),
    _calc("maintenance-fluids", "Pediatric Maintenance Fluids (4-2-1 Rule)", "Maintenance Fluids",
          Specialty.PEDIATRICS,
          "Calculate hourly fluid maintenance requirements.",
          [_number("weight", "Weight", "kg")],
          run_maintenance_fluids),
    _calc("apgar", "APGAR Score", "APGAR", Specialty.PEDIATRICS,
          "Quick assessment of newborn health at 1 and 5 minutes.",
          [_select("hr", "Heart Rate", (("Absent", 0), ("<100 bpm", 1), (">100 bpm", 2))),
           _select("resp", "Respiratory Effort", (("Absent", 0), ("Weak/Irregular", 1), ("Strong/Crying", 2))),
           _select("tone", "Muscle Tone", (("Limp", 0), ("Some Flexion", 1), ("Active Motion", 2))),
           _select("grim", "Reflex Irritability", (("No Response", 0), ("Grimace", 1), ("Cough/Sneeze/Cry", 2))),
           _select("color", "Color", (("Blue/Pale", 0), ("Body Pink/Extremities Blue", 1), ("Completely Pink", 2)))],
          run_apgar),
    _calc("parkland", "Parkland Formula (Burns)", "Parkland", Specialty.CRITICAL_CARE,
          "Fluid resuscitation for burn victims (first 24h).",
          [_number("weight", "Weight", "kg"),
           _number("tbsa", "TBSA Burned", "%")],
          run_parkland),
    _calc("gcs", "Glasgow Coma Scale", "GCS", Specialty.CRITICAL_CARE,
          "Neurological scale for assessing level of consciousness.",
          [_select("eye", "Eye Opening", (("Spontaneous", 4), ("To Speech", 3), ("To Pain", 2), ("None", 1))),
           _select("verbal", "Verbal Response", (("Oriented", 5), ("Confused", 4), ("Inappropriate", 3),
                                                  ("Incomprehensible", 2), ("None", 1))),
           _select("motor", "Motor Response", (("Obeys", 6), ("Localizes Pain", 5), ("Withdraws Pain", 4),
                                                ("Flexion (Decorticate)", 3), ("Extension (Decerebrate)", 2),
                                                ("None", 1)))],
          run_gcs),
    _calc("wells-pe", "Wells' Criteria for Pulmonary Embolism", "Wells' PE", Specialty.CRITICAL_CARE,
          "Predicts probability of Pulmonary Embolism.",
          [_yes_no("clin", "Clinical signs of DVT", yes=3),
           _yes_no("alt", "Alternative diagnosis less likely", yes=3),
           _yes_no("hr", "Heart rate >100", yes=1.5),
           _yes_no("immob", "Immobilization/Surgery (last 4 wks)", yes=1.5),
           _yes_no("prev", "Previous DVT/PE", yes=1.5),
           _yes_no("hemop", "Hemoptysis"),
           _yes_no("malig", "Malignancy")],
          run_wells_pe),
    _calc("curb65", "CURB-65 Severity Score", "CURB-65", Specialty.GENERAL,
          "Predicts mortality in community-acquired pneumonia.",
          [_yes_no("conf", "Confusion"),
           _yes_no("bun", "BUN >19 mg/dL"),
           _yes_no("rr", "Resp Rate ≥30/min"),
           _yes_no("bp", "Systolic <90 or Diastolic ≤60"),
           _yes_no("age", "Age ≥65")],
          run_curb65),
)

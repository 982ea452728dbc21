"""Calculation report generation for DGS Thermal.

Produces text and HTML reports from a SealCase, listing the inputs, the
derived dimensionless groups and the static/rotating ring heat transfer
coefficients.
"""

from __future__ import annotations

import html as html_mod
from datetime import datetime, timezone

from dgs_thermal import __app_name__
from dgs_thermal.core.config import SealCase
from dgs_thermal.core.heat_transfer import SealInputs, SealResults, compute

# (field, label, unit)
INPUT_FIELDS: list[tuple[str, str, str]] = [
    ("d_outer", "Outer Diameter", "m"),
    ("n_rpm", "Speed", "rpm"),
    ("rho", "Density", "kg/m³"),
    ("mu", "Dynamic Viscosity", "Pa·s"),
    ("lambda_gas", "Thermal Conductivity", "W/(m·K)"),
    ("Pr", "Prandtl Number", "—"),
    ("u_axial", "Axial Velocity", "m/s"),
    ("delta_gap", "Seal Gap", "m"),
    ("d_hyd", "Hydraulic Diameter", "m"),
    ("B", "Correction Factor B", "—"),
]

RESULT_FIELDS: list[tuple[str, str, str]] = [
    ("Re_rot", "Rotational Reynolds (Re_rot)", "—"),
    ("Re_ax", "Axial Reynolds (Re_ax)", "—"),
    ("Nu_s", "Static Nusselt (Nu_s)", "—"),
    ("H_s", "Static Ring HTC (H_s)", "W/(m²·K)"),
    ("Nu_r", "Rotating Nusselt (Nu_r)", "—"),
    ("H_r", "Rotating Ring HTC (H_r)", "W/(m²·K)"),
]


def format_value(value: float) -> str:
    """Format a number compactly: scientific for very small or large magnitudes."""
    if value != 0 and (abs(value) < 1e-3 or abs(value) >= 1e6):
        return f"{value:.4e}"
    return f"{value:.4f}"


def format_fields(
    inputs: SealInputs,
    results: SealResults | None = None,
) -> list[tuple[str, str, str]]:
    """Serialize inputs (and results, if given) as (label, value, unit) triples."""
    rows = [(label, format_value(getattr(inputs, key)), unit) for key, label, unit in INPUT_FIELDS]
    if results is not None:
        rows += [
            (label, format_value(getattr(results, key)), unit) for key, label, unit in RESULT_FIELDS
        ]
    return rows


def format_block(inputs: SealInputs, results: SealResults) -> str:
    """Human-readable "label: value unit" block of inputs and results."""
    lines = ["Inputs:"]
    for label, value, unit in format_fields(inputs):
        lines.append(f"  - {label}: {value} {unit}".rstrip())
    lines.append("Results:")
    for key, label, unit in RESULT_FIELDS:
        lines.append(f"  - {label}: {format_value(getattr(results, key))} {unit}".rstrip())
    return "\n".join(lines)


def htc_ratio(results: SealResults) -> float | None:
    """Ratio H_r / H_s, or None when the static coefficient is zero."""
    if results.H_s == 0:
        return None
    return results.H_r / results.H_s


def _case_results(case: SealCase) -> SealResults:
    return case.results if case.results is not None else compute(case.inputs)


# --- Plain-text report ---


def generate_text_report(case: SealCase, assessment: str | None = None) -> str:
    """Generate a plain-text calculation report.

    Results are recomputed from the inputs when the case holds none.

    Args:
        case: SealCase with inputs and (optionally) results.
        assessment: Optional free-text assessment to append.

    Returns:
        Multi-line text report string.
    """
    results = _case_results(case)
    lines: list[str] = []
    _hr = "=" * 60

    lines.append(_hr)
    lines.append(f"  {__app_name__} — Seal Heat Transfer Report")
    lines.append(f"  {case.meta.name}")
    lines.append(_hr)
    lines.append("")

    lines.append("INPUTS")
    lines.append("-" * 40)
    for label, value, unit in format_fields(case.inputs):
        _add_line(lines, label, value, unit)
    lines.append("")

    lines.append("RESULTS")
    lines.append("-" * 40)
    for key, label, unit in RESULT_FIELDS:
        _add_line(lines, label, format_value(getattr(results, key)), unit)
    lines.append("")

    lines.append("RING COMPARISON")
    lines.append("-" * 40)
    ratio = htc_ratio(results)
    _add_line(lines, "H_r / H_s", format_value(ratio) if ratio is not None else "—", "")
    lines.append("")

    if assessment:
        lines.append("ASSESSMENT")
        lines.append("-" * 40)
        lines.extend(f"  {line}" for line in assessment.strip().splitlines())
        lines.append("")

    lines.append(_hr)
    lines.append(f"  Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(f"  {__app_name__} v{case.meta.version}")
    lines.append(_hr)

    return "\n".join(lines)


def _add_line(lines: list[str], label: str, value: str, unit: str) -> None:
    unit_str = f" {unit}" if unit and unit != "—" else ""
    lines.append(f"  {label:<30s} {value:>14}{unit_str}")


# --- HTML report ---


def generate_html_report(case: SealCase, assessment: str | None = None) -> str:
    """Generate an HTML calculation report.

    Produces a self-contained HTML document with inline CSS styling.
    """
    results = _case_results(case)
    sections: list[str] = [_html_header(case)]

    sections.append(_html_table("Inputs", format_fields(case.inputs)))

    rows = [
        (label, format_value(getattr(results, key)), unit) for key, label, unit in RESULT_FIELDS
    ]
    sections.append(_html_table("Results", rows))

    ratio = htc_ratio(results)
    sections.append(
        _html_table(
            "Ring Comparison",
            [("H_r / H_s", format_value(ratio) if ratio is not None else "—", "")],
        )
    )

    if assessment:
        paragraphs = "".join(
            f"<p>{html_mod.escape(p)}</p>" for p in assessment.strip().split("\n\n")
        )
        sections.append(f"<h2>Assessment</h2>\n{paragraphs}")

    sections.append(_html_footer(case))
    return "\n".join(sections)


def _html_header(case: SealCase) -> str:
    title = html_mod.escape(case.meta.name)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{__app_name__} — {title}</title>
<style>
body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
       max-width: 800px; margin: 2em auto; padding: 0 1em; color: #222; }}
h1 {{ color: #0f172a; border-bottom: 2px solid #3b82f6; padding-bottom: 0.3em; }}
h2 {{ color: #1e40af; margin-top: 1.5em; }}
table {{ width: 100%; border-collapse: collapse; margin: 0.5em 0 1.5em; }}
th, td {{ text-align: left; padding: 0.4em 0.8em; border-bottom: 1px solid #e2e8f0; }}
th {{ background: #eff6ff; color: #0f172a; }}
td:nth-child(2) {{ text-align: right; font-family: "SF Mono", "Fira Code", monospace; }}
td:nth-child(3) {{ color: #64748b; font-size: 0.9em; }}
.footer {{ margin-top: 2em; padding-top: 1em; border-top: 1px solid #e2e8f0;
           color: #94a3b8; font-size: 0.85em; }}
</style>
</head>
<body>
<h1>{__app_name__} &mdash; Seal Heat Transfer Report</h1>
<p><strong>{title}</strong></p>
"""


def _html_table(title: str, rows: list[tuple[str, str, str]]) -> str:
    esc = html_mod.escape
    lines = [f"<h2>{esc(title)}</h2>", "<table>"]
    lines.append("<tr><th>Parameter</th><th>Value</th><th>Unit</th></tr>")
    for label, value, unit in rows:
        lines.append(f"<tr><td>{esc(label)}</td><td>{esc(value)}</td><td>{esc(unit)}</td></tr>")
    lines.append("</table>")
    return "\n".join(lines)


def _html_footer(case: SealCase) -> str:
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    return f"""<div class="footer">
Generated: {ts} &middot; {__app_name__} v{html_mod.escape(case.meta.version)}
</div>
</body>
</html>"""


def save_text_report(case: SealCase, filepath: str, assessment: str | None = None) -> None:
    """Generate and save a plain-text report to a file."""
    report = generate_text_report(case, assessment)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(report)


def save_html_report(case: SealCase, filepath: str, assessment: str | None = None) -> None:
    """Generate and save an HTML report to a file."""
    report = generate_html_report(case, assessment)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(report)

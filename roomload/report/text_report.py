"""Plain-text rendering of the results of a load calculation, for printing,
copying or saving to a file.
"""
from __future__ import annotations

from datetime import datetime
from typing import Callable
from .. import Quantity
from ..constants import DEFAULT_INDOOR_TEMPERATURE
from ..engine import InputRecord, Results, CalculationMode
from .translations import Translator

Q_ = Quantity

TranslateFunction = Callable[..., str]

SEPARATOR = '=' * 39
RULE = '-' * 35


def _num(q: Quantity | int | float | None, unit: str | None = None) -> float:
    # blank input fields show as 0
    if q is None:
        return 0
    if isinstance(q, Quantity):
        return q.to(unit).m if unit else q.m
    return q


def _section(translate: TranslateFunction, key: str, **subs) -> str:
    return f"\n--- {translate(key, **subs)} ---"


def _loads_lines(results: Results, translate: TranslateFunction) -> list[str]:
    loads = results.loads
    lines = [
        _section(translate, 'loads.title'),
        translate('loads.people', value=f"{loads.people.total.to('W').m:.0f}"),
        translate('loads.windows', value=f"{loads.windows.total.to('W').m:.0f}"),
        translate('loads.lighting', value=f"{loads.lighting.total.to('W').m:.0f}"),
        translate('loads.appliances', value=f"{loads.equipment.total.to('W').m:.0f}"),
        translate('loads.walls_and_ceiling', value=f"{loads.walls_and_ceiling.to('W').m:.0f}"),
    ]
    if loads.infiltration.total.m != 0.0:
        lines.append(translate('loads.infiltration', value=f"{loads.infiltration.total.to('W').m:.0f}"))
    if loads.ventilation.total.m != 0.0:
        lines.append(translate('loads.ventilation', value=f"{loads.ventilation.total.to('W').m:.0f}"))
    lines += [
        RULE,
        translate('loads.subtotal', value=f"{loads.subtotal.to('W').m:.0f}"),
        translate(
            'loads.total',
            safety=f"{loads.safety_factor.to('pct').m:g}",
            value=f"{loads.total.to('W').m:.0f}"
        ),
        translate('loads.btu', value=f"{loads.total_btu.m:.0f}"),
        translate('loads.tons', value=f"{loads.total_tons.m:.2f}"),
    ]
    return lines


def _psychrometric_lines(results: Results, translate: TranslateFunction) -> list[str]:
    cooling = results.cooling
    undefined = translate('psychro.undefined')
    lines = [_section(translate, 'psychro.title')]
    for name, air in cooling.states.items():
        lines.append(translate(
            'psychro.state',
            name=translate(f'states.{name}'),
            tdb=f"{air.Tdb.to('degC').m:.1f}",
            w=f"{air.W.to('g / kg').m:.2f}",
            rh=f"{air.RH.to('pct').m:.0f}"
        ))
    lines += [
        translate(
            'psychro.coil',
            sensible=f"{cooling.Q_dot_cc_sen.to('W').m:.0f}",
            latent=f"{cooling.Q_dot_cc_lat.to('W').m:.0f}",
            total=f"{cooling.Q_dot_cc.to('W').m:.0f}"
        ),
        translate('psychro.shr', value=f"{cooling.SHR_cc.to('frac').m:.2f}"),
        translate(
            'psychro.adp',
            value=f"{cooling.ADP.Tdb.to('degC').m:.1f}" if cooling.ADP is not None else undefined
        ),
        translate(
            'psychro.bf',
            value=f"{cooling.BF.to('frac').m:.3f}" if cooling.BF is not None else undefined
        ),
    ]
    heating = results.heating
    if heating is not None:
        lines += [
            _section(translate, 'psychro.heating_title'),
            translate('psychro.heating_load', value=f"{heating.Q_dot_zone.to('W').m:.0f}"),
            translate(
                'psychro.heating_coil',
                entering=f"{heating.T_entering.to('degC').m:.1f}",
                leaving=f"{heating.T_leaving.to('degC').m:.1f}",
                value=f"{heating.Q_dot_hc.to('W').m:.0f}"
            ),
        ]
    return lines


def render_report(
    inputs: InputRecord,
    results: Results,
    translate: TranslateFunction | None = None,
    created_at: datetime | None = None
) -> str:
    """Returns a human-readable report of the input record and the results of
    a load calculation.

    Parameters
    ----------
    inputs:
        The input record the results were computed from.
    results:
        The results of `compute_loads`.
    translate: optional
        Function that maps a dotted key and keyword substitutions to the
        string to display, e.g. `Translator('ar').translate`. Defaults to
        English.
    created_at: optional
        Timestamp printed in the header. Defaults to the current time.
    """
    translate = translate or Translator().translate
    created_at = created_at or datetime.now()
    loads = results.loads
    run_length = f"{results.materials.run_length.to('m').m:g}"

    lines = [
        translate('report.title'),
        SEPARATOR,
        translate('report.project', name=inputs.project_name or translate('report.unnamed')),
        translate('report.created', date=created_at.strftime('%Y-%m-%d %H:%M')),
        translate('report.mode', mode=results.mode.value),
        _section(translate, 'summary.title'),
        translate(
            'summary.total_load',
            watts=f"{loads.total.to('W').m:,.0f}",
            tons=f"{loads.total_tons.m:.2f}"
        ),
        translate(
            'summary.airflow',
            cfm=f"{results.airflow.cfm.m:.0f}",
            velocity=f"{results.airflow.velocity.to('ft / min').m:g}"
        ),
        translate('summary.duct', diameter=f"{results.duct.round_diameter.m:.1f}"),
        translate(
            'summary.sheet_metal',
            sheet=f"{results.materials.sheet_metal.to('m ** 2').m:.2f}",
            insulation=f"{results.materials.insulation.to('m ** 2').m:.2f}"
        ),
    ]
    if results.load_density is not None:
        lines.append(translate('summary.load_density', density=f"{results.load_density.m:.1f}"))
    lines.append('\n' + SEPARATOR)

    lines += _loads_lines(results, translate)

    lines += [
        _section(translate, 'duct.title'),
        translate('duct.airflow', value=f"{results.airflow.cfm.m:.0f}"),
        translate('duct.velocity', value=f"{results.airflow.velocity.to('ft / min').m:g}"),
        translate('duct.area', value=f"{results.duct.area.m:.3f}"),
        translate('duct.round', value=f"{results.duct.round_diameter.m:.1f}"),
        translate(
            'duct.rect',
            width=f"{results.duct.rect_width.m:.1f}",
            height=f"{results.duct.rect_height.m:.1f}"
        ),
        _section(translate, 'materials.title', length=run_length),
        translate('materials.sheet_metal', value=f"{results.materials.sheet_metal.to('m ** 2').m:.2f}"),
        translate('materials.insulation', value=f"{results.materials.insulation.to('m ** 2').m:.2f}"),
        translate('materials.flanges', value=results.materials.flanges),
        translate('materials.screws', value=results.materials.screws),
    ]

    if results.mode is CalculationMode.PSYCHROMETRIC and results.cooling is not None:
        lines += _psychrometric_lines(results, translate)

    geo = inputs.geometry
    window = inputs.envelope.window
    T_in = inputs.design.T_in if inputs.design.T_in is not None else DEFAULT_INDOOR_TEMPERATURE
    lines += [
        _section(translate, 'inputs.title'),
        translate(
            'inputs.room',
            length=f"{_num(geo.length, 'm'):g}",
            width=f"{_num(geo.width, 'm'):g}",
            height=f"{_num(geo.height if geo.height is not None else geo.ceiling_height, 'm'):g}"
        ),
        translate(
            'inputs.people',
            count=_num(inputs.occupancy.count),
            activity=inputs.occupancy.activity.value
        ),
        translate('inputs.windows', area=f"{_num(window.area, 'm ** 2'):g}", direction=window.orientation.value),
        translate('inputs.lighting', value=f"{_num(inputs.internal_loads.lighting, 'W'):g}"),
        translate('inputs.appliances', value=f"{_num(inputs.internal_loads.equipment, 'W'):g}"),
        translate('inputs.outdoor', value=f"{_num(inputs.design.T_out, 'degC'):g}"),
        translate('inputs.indoor', value=f"{_num(T_in, 'degC'):g}"),
        translate('inputs.building', value=inputs.building_type.value),
        translate('inputs.equipment', value=inputs.system.equipment_class.value),
        translate('inputs.air_system', value=inputs.system.air_system.value),
        _section(translate, 'notes.title'),
        translate('notes.safety', safety=f"{loads.safety_factor.to('pct').m:g}"),
        translate('notes.standard'),
        translate('notes.materials', length=run_length),
        translate('notes.review'),
    ]
    return '\n'.join(lines) + '\n'

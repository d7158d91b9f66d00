from __future__ import annotations

from typing import Any
from ..logging import ModuleLogger

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)


TRANSLATIONS: dict[str, dict[str, Any]] = {
    'en': {
        'report': {
            'title': "Thermal Load Calculation Report",
            'project': "Project name: {name}",
            'unnamed': "Unnamed",
            'created': "Created: {date}",
            'mode': "Calculation mode: {mode}",
        },
        'summary': {
            'title': "Results summary",
            'total_load': "Total load: {watts} W ({tons} TR)",
            'airflow': "Airflow: {cfm} CFM (at {velocity} ft/min)",
            'duct': "Duct diameter: {diameter} in (round)",
            'sheet_metal': "Sheet metal: {sheet} m² (insulation {insulation} m²)",
            'load_density': "Load density: {density} W/m²",
        },
        'loads': {
            'title': "Thermal loads",
            'people': "People load: {value} W",
            'windows': "Windows load: {value} W",
            'lighting': "Lighting load: {value} W",
            'appliances': "Appliances load: {value} W",
            'walls_and_ceiling': "Walls and ceiling load: {value} W",
            'infiltration': "Infiltration load: {value} W",
            'ventilation': "Ventilation load: {value} W",
            'subtotal': "Total load (before safety): {value} W",
            'total': "Total load (with {safety}% safety): {value} W",
            'btu': "- in BTU/hr: {value} BTU/hr",
            'tons': "- in refrigeration tons: {value} TR",
        },
        'duct': {
            'title': "Duct sizes",
            'airflow': "Required airflow: {value} CFM",
            'velocity': "Air velocity: {value} ft/min",
            'area': "Duct area: {value} ft²",
            'round': "Round duct (diameter): {value} in",
            'rect': "Rectangular duct: {width} in (width) × {height} in (height)",
        },
        'materials': {
            'title': "Material quantities (for {length} m)",
            'sheet_metal': "Sheet metal: {value} m²",
            'insulation': "Insulation: {value} m²",
            'flanges': "Flanges: {value} pcs",
            'screws': "Screws: {value} pcs",
        },
        'psychro': {
            'title': "Psychrometric design",
            'state': "{name}: {tdb} °C DB, {w} g/kg, {rh}% RH",
            'coil': "Cooling coil load: {sensible} W (S), {latent} W (L), {total} W",
            'shr': "Coil sensible heat ratio: {value}",
            'adp': "Apparatus dew point: {value} °C",
            'bf': "Bypass factor: {value}",
            'undefined': "n/a",
            'heating_title': "Heating design",
            'heating_load': "Room heating load: {value} W",
            'heating_coil': "Heating coil: {entering} °C → {leaving} °C, {value} W",
        },
        'states': {
            'Outdoor Air': "Outdoor air",
            'Mixed Air': "Mixed air",
            'Coil-Leaving Air': "Coil-leaving air",
            'Supply-Fan-Outlet Air': "Supply-fan-outlet air",
            'Room/Zone Air': "Room/zone air",
        },
        'inputs': {
            'title': "Inputs used",
            'room': "Room dimensions: {length} × {width} × {height} m",
            'people': "Number of people: {count} ({activity})",
            'windows': "Window area: {area} m² ({direction})",
            'lighting': "Lighting power: {value} W",
            'appliances': "Appliances power: {value} W",
            'outdoor': "Outdoor temperature: {value} °C",
            'indoor': "Indoor temperature: {value} °C",
            'building': "Building type: {value}",
            'equipment': "Equipment class: {value}",
            'air_system': "Air system: {value}",
        },
        'notes': {
            'title': "Important notes",
            'safety': "✓ A safety factor of {safety}% has been added to the total load.",
            'standard': "✓ Calculations are based on standard HVAC load equations.",
            'materials': "✓ Material quantities are calculated for {length} m of duct.",
            'review': "✓ Review by a certified HVAC engineer is recommended before execution.",
        },
    },
    'ar': {
        'report': {
            'title': "تقرير حساب الأحمال الحرارية",
            'project': "اسم المشروع: {name}",
            'unnamed': "غير مسمى",
            'created': "تاريخ الإنشاء: {date}",
            'mode': "طريقة الحساب: {mode}",
        },
        'summary': {
            'title': "ملخص النتائج",
            'total_load': "الحمل الكلي: {watts} W ({tons} طن)",
            'airflow': "تدفق الهواء: {cfm} CFM (بسرعة {velocity} ft/min)",
            'duct': "قطر الدكت: {diameter} بوصة (دائري)",
            'sheet_metal': "صاج مطلوب: {sheet} م² (لعازل {insulation} م²)",
        },
        'loads': {
            'title': "الأحمال الحرارية",
            'people': "حمل الأشخاص: {value} W",
            'windows': "حمل النوافذ: {value} W",
            'lighting': "حمل الإضاءة: {value} W",
            'appliances': "حمل الأجهزة: {value} W",
            'walls_and_ceiling': "حمل الجدران والسقف: {value} W",
            'subtotal': "الحمل الكلي (قبل الأمان): {value} W",
            'total': "الحمل الكلي (مع {safety}% أمان): {value} W",
            'btu': "- بوحدة BTU/hr: {value} BTU/hr",
            'tons': "- بوحدة طن تبريد: {value} طن",
        },
        'duct': {
            'title': "مقاسات الدكتات",
            'airflow': "تدفق الهواء المطلوب: {value} CFM",
            'velocity': "سرعة الهواء: {value} ft/min",
            'area': "مساحة الدكت: {value} ft²",
            'round': "الدكت الدائري (القطر): {value} بوصة",
            'rect': "الدكت المستطيل: {width} بوصة (عرض) × {height} بوصة (ارتفاع)",
        },
        'materials': {
            'title': "كميات المواد (لـ {length} متر)",
            'sheet_metal': "الصاج: {value} متر مربع",
            'insulation': "العازل: {value} متر مربع",
            'flanges': "الفلنجات: {value} قطعة",
            'screws': "المسامير: {value} مسمار",
        },
        'inputs': {
            'title': "المدخلات المستخدمة",
            'room': "أبعاد الغرفة: {length} × {width} × {height} م",
            'people': "عدد الأشخاص: {count} ({activity})",
            'windows': "مساحة النوافذ: {area} م² ({direction})",
            'lighting': "قدرة الإضاءة: {value} واط",
            'appliances': "قدرة الأجهزة: {value} واط",
            'outdoor': "درجة الحرارة الخارجية: {value}°س",
            'indoor': "درجة الحرارة الداخلية: {value}°س",
            'building': "نوع المبنى: {value}",
            'equipment': "فئة المعدات: {value}",
            'air_system': "نظام الهواء: {value}",
        },
        'notes': {
            'title': "ملاحظات هامة",
            'safety': "✓ تم إضافة معامل أمان {safety}% للحمل الكلي.",
            'standard': "✓ الحسابات تعتمد على المعادلات القياسية لحساب أحمال التكييف.",
            'materials': "✓ كميات المواد محسوبة لطول {length} متر من الدكت.",
            'review': "✓ يُنصح بمراجعة مهندس تكييف معتمد قبل التنفيذ.",
        },
    },
}

FALLBACK_LANGUAGE = 'en'


def _lookup(table: dict[str, Any], keys: list[str]) -> Any:
    node: Any = table
    for k in keys:
        if not isinstance(node, dict) or k not in node:
            return None
        node = node[k]
    return node


class Translator:
    """Looks up user-facing strings by dotted key (e.g. 'loads.people').

    A key missing in the selected language falls back to English, and a key
    missing in English as well is returned as is. Placeholders `{name}` in
    the string are replaced by the keyword arguments passed to `translate`.
    """

    def __init__(
        self,
        language: str = FALLBACK_LANGUAGE,
        translations: dict[str, dict[str, Any]] | None = None
    ):
        self.translations = translations or TRANSLATIONS
        if language not in self.translations:
            raise ValueError(
                f"language '{language}' is not available; choose from "
                f"{', '.join(self.translations)}"
            )
        self.language = language

    def translate(self, key: str, **substitutions: Any) -> str:
        keys = key.split('.')
        result = _lookup(self.translations[self.language], keys)
        if result is None:
            logger.warning(f"translation key not found: {key} ({self.language})")
            result = _lookup(self.translations.get(FALLBACK_LANGUAGE, {}), keys)
        if not isinstance(result, str):
            return key
        for name, value in substitutions.items():
            result = result.replace(f'{{{name}}}', str(value))
        return result

    __call__ = translate

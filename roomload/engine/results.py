from __future__ import annotations

from dataclasses import dataclass
import pandas as pd
from .. import Quantity
from ..load_calc import LoadBreakdown, HeatingLoad
from ..air_distribution import Airflow, DuctSizing, MaterialTakeoff
from ..air_conditioning import CoolingOutput, HeatingOutput
from .settings import CalculationMode

Q_ = Quantity


@dataclass(frozen=True)
class Results:
    """Results of the load calculation of a room.

    Attributes
    ----------
    mode:
        The calculation mode that produced the results.
    loads:
        Cooling load per heat source, subtotal and total with safety margin.
    airflow:
        Design supply air flow rate and duct velocity.
    duct:
        Round and rectangular supply duct sizes.
    materials:
        Duct material quantities for one reference run.
    load_density:
        Total cooling load per unit floor area; None if the floor area is
        zero.
    cooling:
        Psychrometric states and coil performance at summer design
        conditions (psychrometric mode only).
    heating_load:
        Heat loss of the room at winter design conditions (psychrometric mode
        with a winter outdoor temperature only).
    heating:
        Psychrometric states and heating coil load at winter design
        conditions (idem).
    """
    mode: CalculationMode
    loads: LoadBreakdown
    airflow: Airflow
    duct: DuctSizing
    materials: MaterialTakeoff
    load_density: Quantity | None = None
    cooling: CoolingOutput | None = None
    heating_load: HeatingLoad | None = None
    heating: HeatingOutput | None = None

    @property
    def total_load(self) -> Quantity:
        return self.loads.total

    @property
    def total_load_btu(self) -> Quantity:
        return self.loads.total_btu

    @property
    def total_load_tons(self) -> Quantity:
        return self.loads.total_tons

    def to_dict(self) -> dict[str, float | None]:
        """Returns the main results as plain numbers, in the units the report
        uses (W, Btu/h, TR, cfm, ft², inch, m²).
        """
        d = {
            'people_W': self.loads.people.total.to('W').m,
            'windows_W': self.loads.windows.total.to('W').m,
            'lighting_W': self.loads.lighting.total.to('W').m,
            'appliances_W': self.loads.equipment.total.to('W').m,
            'walls_and_ceiling_W': self.loads.walls_and_ceiling.to('W').m,
            'infiltration_W': self.loads.infiltration.total.to('W').m,
            'ventilation_W': self.loads.ventilation.total.to('W').m,
            'sub_total_W': self.loads.subtotal.to('W').m,
            'total_load_W': self.loads.total.to('W').m,
            'total_load_btu': self.loads.total_btu.to('Btu / hr').m,
            'total_load_tons': self.loads.total_tons.to('TR').m,
            'cfm': self.airflow.cfm.m,
            'velocity_fpm': self.airflow.velocity.to('ft / min').m,
            'area_sqft': self.duct.area.m,
            'round_diameter_in': self.duct.round_diameter.m,
            'rect_width_in': self.duct.rect_width.m,
            'rect_height_in': self.duct.rect_height.m,
            'sheet_metal_m2': self.materials.sheet_metal.to('m ** 2').m,
            'insulation_m2': self.materials.insulation.to('m ** 2').m,
            'flanges': self.materials.flanges,
            'screws': self.materials.screws,
            'load_density_W_m2': (
                self.load_density.to('W / m ** 2').m
                if self.load_density is not None else None
            )
        }
        if self.cooling is not None:
            d.update({
                'cooling_coil_sensible_W': self.cooling.Q_dot_cc_sen.to('W').m,
                'cooling_coil_latent_W': self.cooling.Q_dot_cc_lat.to('W').m,
                'cooling_coil_total_W': self.cooling.Q_dot_cc.to('W').m,
                'cooling_coil_SHR': self.cooling.SHR_cc.to('frac').m,
                'ADP_C': self.cooling.ADP.Tdb.to('degC').m if self.cooling.ADP is not None else None,
                'bypass_factor': self.cooling.BF.to('frac').m if self.cooling.BF is not None else None
            })
        if self.heating is not None:
            d.update({
                'heating_load_W': self.heating.Q_dot_zone.to('W').m,
                'heating_coil_W': self.heating.Q_dot_hc.to('W').m
            })
        return d

    def get_psychrometric_table(self, n_digits: int = 2) -> pd.DataFrame | None:
        """Returns a Pandas DataFrame with the dry-bulb temperature, humidity
        ratio and relative humidity of the named air states of the cooling
        (and heating) design, or None in simple mode.
        """
        if self.cooling is None:
            return None
        rows = {'state': [], 'season': [], 'Tdb [°C]': [], 'W [g/kg]': [], 'RH [%]': []}
        seasons = [('summer', self.cooling)]
        if self.heating is not None:
            seasons.append(('winter', self.heating))
        for season, output in seasons:
            for name, air in output.states.items():
                rows['state'].append(name)
                rows['season'].append(season)
                rows['Tdb [°C]'].append(round(air.Tdb.to('degC').m, n_digits))
                rows['W [g/kg]'].append(round(air.W.to('g / kg').m, n_digits))
                rows['RH [%]'].append(round(air.RH.to('pct').m, n_digits))
        return pd.DataFrame(rows)

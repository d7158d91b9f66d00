from __future__ import annotations

from dataclasses import dataclass
import warnings
from .. import Quantity
from ..constants import EPSILON, ADP_MAX_ITERATIONS, ADP_TOLERANCE
from ..exceptions import ConvergenceWarning
from ..logging import ModuleLogger
from ..fluids import HumidAir, RHO_STANDARD_AIR, CP_DRY_AIR, H_FG
from ..fluids import psychrometrics as psy

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)

T_ADP_MIN = -40.0   # °C, lower limit of the ADP search
_DT = 1.0e-3        # K, step of the finite-difference slope of the saturation curve


@dataclass
class AirStream:
    state: HumidAir
    m_da: Quantity


class AdiabaticMixing:
    """Mixing of two air streams in the mixing plenum of an air-handling
    unit. Dry-bulb temperature and humidity ratio of the leaving stream are
    the dry-air mass flow weighted averages of the entering streams.
    """

    def __init__(self, in1: AirStream, in2: AirStream):
        self.stream_in1 = in1
        self.stream_in2 = in2

    @property
    def m_da_o(self) -> Quantity:
        return (self.stream_in1.m_da + self.stream_in2.m_da).to('kg / s')

    @property
    def m_da_i2_fractional(self) -> Quantity:
        """Returns the mass flow rate of the second entering air stream as a
        fraction of the mass flow rate of the leaving air stream."""
        m_o = self.m_da_o.m
        if m_o <= 0.0:
            raise ValueError("mixing requires a positive total mass flow rate")
        return Q_(self.stream_in2.m_da.to('kg / s').m / m_o, 'frac')

    @property
    def m_da_i1_fractional(self) -> Quantity:
        return 1 - self.m_da_i2_fractional

    @property
    def stream_out(self) -> AirStream:
        x2 = self.m_da_i2_fractional.m
        s1, s2 = self.stream_in1.state, self.stream_in2.state
        T_ao = (1 - x2) * s1.Tdb.to('degC').m + x2 * s2.Tdb.to('degC').m
        W_ao = (1 - x2) * s1.W.to('kg / kg').m + x2 * s2.W.to('kg / kg').m
        state = HumidAir(Q_(T_ao, 'degC'), Q_(W_ao, 'kg / kg'), s1.P)
        return AirStream(state, self.m_da_o)


class Fan:
    """Supply fan in draw-through arrangement. All power taken up by the fan
    ends up as sensible heat in the air stream.
    """

    def __init__(
        self,
        m_da: Quantity,
        dP_fan: Quantity,
        eta_fan: Quantity,
        air_in: HumidAir | None = None,
        air_out: HumidAir | None = None
    ) -> None:
        """Creates `Fan` instance

        Parameters
        ----------
        m_da:
            The mass flow rate of dry air through the fan.
        dP_fan:
            The pressure difference across the fan.
        eta_fan:
            Overall efficiency of fan and motor.
        air_in: optional
            The air state at the fan inlet.
        air_out: optional
            The air state at the fan outlet. Either `air_in` or `air_out`
            must be given.
        """
        if air_in is None and air_out is None:
            raise ValueError("either the inlet or the outlet air state is required")
        self.m_da = m_da.to('kg / s')
        self.dP_fan = dP_fan.to('Pa')
        self.eta_fan = eta_fan.to('frac')
        self._air_in = air_in
        self._air_out = air_out

    @property
    def V_dot(self) -> Quantity:
        return (self.m_da / RHO_STANDARD_AIR).to('m ** 3 / s')

    @property
    def W_input(self) -> Quantity:
        """The input power taken up by the fan."""
        if self.eta_fan.m <= 0.0:
            return Q_(0.0, 'W')
        return (self.V_dot * self.dP_fan / self.eta_fan).to('W')

    @property
    def Q(self) -> Quantity:
        """The heat given off by the fan to the air."""
        return self.W_input

    @property
    def dT(self) -> Quantity:
        """Temperature rise of the air across the fan."""
        if self.m_da.m <= 0.0:
            return Q_(0.0, 'K')
        return (self.W_input / (self.m_da * CP_DRY_AIR)).to('K')

    @property
    def air_out(self) -> HumidAir:
        """The air state at the fan outlet."""
        if self._air_out is None:
            # fan heating is a sensible process: humidity ratio = cst.
            T_ao = self._air_in.Tdb.to('degC').m + self.dT.m
            self._air_out = HumidAir(Q_(T_ao, 'degC'), self._air_in.W, self._air_in.P)
        return self._air_out

    @property
    def air_in(self) -> HumidAir:
        """The air state at the fan inlet."""
        if self._air_in is None:
            T_ai = self._air_out.Tdb.to('degC').m - self.dT.m
            self._air_in = HumidAir(Q_(T_ai, 'degC'), self._air_out.W, self._air_out.P)
        return self._air_in


@dataclass(frozen=True)
class ADPSolution:
    """Result of the apparatus dew point iteration. `T_adp` is None when no
    apparatus dew point could be found.
    """
    T_adp: float | None
    iterations: int
    converged: bool


def solve_apparatus_dew_point(
    T_mix: float,
    W_mix: float,
    T_lvg: float,
    W_lvg: float,
    P: float = psy.P_STD,
    max_iter: int = ADP_MAX_ITERATIONS,
    tol: float = ADP_TOLERANCE
) -> ADPSolution:
    """Solves for the dry-bulb temperature (°C) of the apparatus dew point of
    a cooling coil: the point on the saturation curve where the straight
    coil condition line from entering (mixed) air through leaving air
    meets the saturation curve.

    Starting from the leaving dry-bulb temperature, each step recomputes the
    saturation humidity ratio and its slope at the current estimate and moves
    the estimate to where the tangent to the saturation curve crosses the
    condition line. The iteration stops when two successive estimates differ
    less than `tol`, or after `max_iter` steps; in the latter case a
    `ConvergenceWarning` is issued and no ADP is returned.

    Parameters
    ----------
    T_mix, W_mix:
        Dry-bulb temperature (°C) and humidity ratio (kg/kg) of the air
        entering the coil.
    T_lvg, W_lvg:
        Dry-bulb temperature (°C) and humidity ratio (kg/kg) of the air
        leaving the coil.
    P:
        Total air pressure (Pa).
    max_iter:
        Maximum number of iteration steps.
    tol:
        Convergence tolerance on the ADP temperature (K).
    """
    dT_coil = T_mix - T_lvg
    if dT_coil < EPSILON:
        logger.warning(
            f"coil entering ({T_mix:.2f} °C) and leaving ({T_lvg:.2f} °C) "
            "dry-bulb temperatures leave no cooling process: "
            "apparatus dew point is undefined"
        )
        return ADPSolution(None, 0, False)
    # slope of the coil condition line
    s = (W_mix - W_lvg) / dT_coil
    T = T_lvg
    i = 0
    while i < max_iter:
        i += 1
        W_sat = psy.saturation_humidity_ratio(T, P)
        dW_sat = (psy.saturation_humidity_ratio(T + _DT, P) - W_sat) / _DT
        W_line = W_lvg + s * (T - T_lvg)
        den = dW_sat - s
        if den <= EPSILON:
            # the condition line is steeper than the saturation curve and
            # cannot meet it
            break
        T_new = T - (W_sat - W_line) / den
        if T_new < T_ADP_MIN:
            break
        converged = abs(T_new - T) < tol
        T = T_new
        if converged:
            logger.debug(f"ADP = {T:.4f} °C after {i} iterations")
            return ADPSolution(T, i, True)
    warnings.warn(
        f"Apparatus dew point not found after {i} iterations "
        f"(entering {T_mix:.2f} °C / {W_mix * 1e3:.2f} g/kg, "
        f"leaving {T_lvg:.2f} °C / {W_lvg * 1e3:.2f} g/kg)",
        category=ConvergenceWarning
    )
    return ADPSolution(None, i, False)


class CoolingCoil:
    """Cooling and dehumidifying coil between a known entering and leaving
    air state.
    """

    def __init__(
        self,
        air_in: HumidAir,
        air_out: HumidAir,
        m_da: Quantity,
        max_iter: int = ADP_MAX_ITERATIONS,
        tol: float = ADP_TOLERANCE
    ) -> None:
        self.air_in = air_in
        self.air_out = air_out
        self.m_da = m_da.to('kg / s')
        self._max_iter = max_iter
        self._tol = tol
        self._adp: ADPSolution | None = None

    @property
    def Q_sen(self) -> Quantity:
        """Sensible heat removed from the air."""
        dT = self.air_in.Tdb.to('K') - self.air_out.Tdb.to('K')
        return (self.m_da * CP_DRY_AIR * dT).to('W')

    @property
    def Q_lat(self) -> Quantity:
        """Latent heat removed from the air."""
        dW = self.air_in.W - self.air_out.W
        return (self.m_da * H_FG * dW).to('W')

    @property
    def Q(self) -> Quantity:
        return self.Q_sen + self.Q_lat

    @property
    def SHR(self) -> Quantity:
        """Sensible heat ratio of the coil; zero when the coil does not
        remove any heat.
        """
        Q = self.Q.to('W').m
        if Q <= 0.0:
            return Q_(0.0, 'frac')
        return Q_(self.Q_sen.to('W').m / Q, 'frac')

    @property
    def adp_solution(self) -> ADPSolution:
        if self._adp is None:
            self._adp = solve_apparatus_dew_point(
                self.air_in.Tdb.to('degC').m, self.air_in.W.to('kg / kg').m,
                self.air_out.Tdb.to('degC').m, self.air_out.W.to('kg / kg').m,
                self.air_in.P.to('Pa').m, self._max_iter, self._tol
            )
        return self._adp

    @property
    def ADP(self) -> HumidAir | None:
        """Apparatus dew point of the coil, None if undefined."""
        T_adp = self.adp_solution.T_adp
        if T_adp is None:
            return None
        return HumidAir.saturated(Q_(T_adp, 'degC'), self.air_in.P)

    @property
    def BF(self) -> Quantity | None:
        """Bypass factor of the coil, None if undefined."""
        T_adp = self.adp_solution.T_adp
        if T_adp is None:
            return None
        T_mix = self.air_in.Tdb.to('degC').m
        T_lvg = self.air_out.Tdb.to('degC').m
        if abs(T_mix - T_adp) < EPSILON:
            return None
        return Q_((T_lvg - T_adp) / (T_mix - T_adp), 'frac')

    @property
    def beta(self) -> Quantity | None:
        """Contact factor of the coil (1 - bypass factor)."""
        BF = self.BF
        return None if BF is None else 1 - BF

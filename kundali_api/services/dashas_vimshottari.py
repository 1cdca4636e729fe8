import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Tuple

from .errors import DashaCycleError
from .vedic import nakshatra_fraction, nakshatra_index

logger = logging.getLogger(__name__)

# Vimshottari order and full years per Maha
DASHA_ORDER = ["Ketu","Venus","Sun","Moon","Mars","Rahu","Jupiter","Saturn","Mercury"]
YEARS =      [   7,     20,    6,    10,     7,     18,       16,      19,       17]

CYCLE_YEARS = 120
YEAR_DAYS = 365.25
# Two full passes of the order; the search can never legitimately need more
MAX_MAHADASHA_STEPS = 2 * len(DASHA_ORDER)


def _span(years: float) -> timedelta:
    return timedelta(days=years * YEAR_DAYS)


def _iso(dt: datetime) -> str:
    return dt.date().isoformat()


def antardasha_years(maha_idx: int, antar_idx: int) -> float:
    return YEARS[maha_idx] * YEARS[antar_idx] / CYCLE_YEARS


def birth_balance(moon_lon_sid: float) -> Tuple[int, float]:
    """Index of the birth Mahadasha lord and the years of it left at birth."""
    lord_idx = nakshatra_index(moon_lon_sid) % 9
    traversed = nakshatra_fraction(moon_lon_sid)
    return lord_idx, YEARS[lord_idx] * (1.0 - traversed)


def _progress(start: datetime, end: datetime, now: datetime) -> int:
    total = (end - start).total_seconds()
    if total <= 0:
        return 100
    pct = round((now - start).total_seconds() / total * 100)
    return min(100, max(0, pct))


def _locate_antardasha(maha_idx: int, maha_start: datetime, maha_end: datetime,
                       now: datetime) -> Dict[str, Any]:
    ad_start = maha_start
    for step in range(len(DASHA_ORDER)):
        ad_idx = (maha_idx + step) % 9
        last = step == len(DASHA_ORDER) - 1
        # the final sub-period closes exactly on the Maha boundary
        ad_end = maha_end if last else ad_start + _span(antardasha_years(maha_idx, ad_idx))
        if now <= ad_end:
            next_idx = (maha_idx + 1) % 9 if last else (ad_idx + 1) % 9
            return {
                "current_mahadasha": DASHA_ORDER[maha_idx],
                "current_antardasha": DASHA_ORDER[ad_idx],
                "start_date": _iso(ad_start),
                "end_date": _iso(ad_end),
                "next_antardasha": DASHA_ORDER[next_idx],
                "next_antardasha_date": _iso(ad_end),
                "progress": _progress(ad_start, ad_end, now),
                "mahadasha_start": _iso(maha_start),
                "mahadasha_end": _iso(maha_end),
            }
        ad_start = ad_end
    raise DashaCycleError(f"No antardasha of {DASHA_ORDER[maha_idx]} contains {now.isoformat()}")


def current_dasha(moon_lon_sid: float, birth_dt: datetime, now: datetime) -> Dict[str, Any]:
    """Active Mahadasha/Antardasha at ``now`` for a Moon at ``moon_lon_sid`` at birth."""
    lord_idx, balance = birth_balance(moon_lon_sid)
    balance_end = birth_dt + _span(balance)
    logger.debug(
        "dasha.birth_balance",
        extra={"lord": DASHA_ORDER[lord_idx], "balance_years": round(balance, 4)},
    )

    if now <= balance_end:
        # Still inside the birth Mahadasha: no sub-period refinement
        return {
            "current_mahadasha": DASHA_ORDER[lord_idx],
            "current_antardasha": DASHA_ORDER[lord_idx],
            "start_date": _iso(birth_dt),
            "end_date": _iso(balance_end),
            "next_antardasha": DASHA_ORDER[(lord_idx + 1) % 9],
            "next_antardasha_date": _iso(balance_end),
            "progress": _progress(birth_dt, balance_end, now),
            "mahadasha_start": _iso(birth_dt),
            "mahadasha_end": _iso(balance_end),
        }

    maha_idx = lord_idx
    maha_start = balance_end
    for _ in range(MAX_MAHADASHA_STEPS):
        maha_idx = (maha_idx + 1) % 9
        maha_end = maha_start + _span(YEARS[maha_idx])
        if now <= maha_end:
            return _locate_antardasha(maha_idx, maha_start, maha_end, now)
        maha_start = maha_end

    raise DashaCycleError(
        f"Mahadasha search exceeded {MAX_MAHADASHA_STEPS} steps "
        f"(birth {birth_dt.isoformat()}, now {now.isoformat()})"
    )


def compute_vimshottari(moon_lon_sid: float, birth_dt: datetime, levels: int = 2,
                        cycles: int = 1) -> List[Dict[str, Any]]:
    """
    Returns list of dasha periods with ISO start/end dates.
    Algorithm:
      - Birth Mahadasha lord = order[nakshatra idx % 9], balance = (1 - fraction traversed) * years
      - Then full Mahas in sequence for ``cycles`` passes of the 120-year order
      - For Antar: within each Maha, sub-order starts from the Maha's own lord;
        the birth Maha's Antars are laid out over its nominal full span and
        clipped at birth
    """
    lord_idx, balance = birth_balance(moon_lon_sid)

    mahas = []
    nominal_start = birth_dt - _span(YEARS[lord_idx] - balance)
    start = birth_dt
    idx = lord_idx
    for _ in range(1 + 9 * cycles):
        end = nominal_start + _span(YEARS[idx])
        mahas.append((idx, nominal_start, start, end))
        idx = (idx + 1) % 9
        nominal_start = start = end

    periods = []
    for m_idx, _nominal, m_start, m_end in mahas:
        periods.append({
            "level": 1, "lord": DASHA_ORDER[m_idx],
            "start": _iso(m_start), "end": _iso(m_end),
            "parent": None,
        })

    if levels >= 2:
        for m_idx, m_nominal, m_start, m_end in mahas:
            cur = m_nominal
            for step in range(9):
                a_idx = (m_idx + step) % 9
                sub_end = m_end if step == 8 else cur + _span(antardasha_years(m_idx, a_idx))
                if sub_end > m_start:
                    periods.append({
                        "level": 2, "lord": DASHA_ORDER[a_idx], "parent": DASHA_ORDER[m_idx],
                        "start": _iso(max(cur, m_start)), "end": _iso(sub_end),
                    })
                cur = sub_end

    return periods

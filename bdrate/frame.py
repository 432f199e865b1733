# frame.py
# BD-Rate / BD-PSNR table from a DataFrame of RD points
# (one row per operating point: sequence, tool, bitrate, quality).
import numpy as np
import pandas as pd

from bdrate.constants import DEFAULT_ORDER, MIN_POINTS, NO_OVERLAP
from bdrate.delta import bdbr, bdsnr
from bdrate.exceptions import InvalidCurveInput
from bdrate.logging import get_logger

logger = get_logger(__name__)

COLUMNS = ["seq", "tool", "n_points", "bd_rate_percent", "bd_psnr_db", "status"]


def _clean(df: pd.DataFrame, rate_col: str, quality_col: str) -> pd.DataFrame:
    df = df.copy()
    for c in [rate_col, quality_col]:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    df = df.dropna(subset=[rate_col, quality_col])
    return df[df[rate_col] > 0]


def _points(df: pd.DataFrame, rate_col: str, quality_col: str):
    return list(zip(df[rate_col].astype(float), df[quality_col].astype(float)))


def _compare(anchor_pts, test_pts, order):
    """Returns (bd_rate, bd_psnr, status)."""
    if len(anchor_pts) < MIN_POINTS or len(test_pts) < MIN_POINTS:
        return np.nan, np.nan, "not_enough_points"
    try:
        return bdbr(anchor_pts, test_pts, order), bdsnr(anchor_pts, test_pts, order), "ok"
    except InvalidCurveInput as e:
        if str(e).startswith(NO_OVERLAP):
            return np.nan, np.nan, "no_overlap"
        return np.nan, np.nan, str(e)


def bd_table(df: pd.DataFrame, anchor, rate_col: str = "bitrate_kbps",
             quality_col: str = "psnr_y", seq_col: str = "seq",
             label_col: str = "tool", order: int = DEFAULT_ORDER) -> pd.DataFrame:
    """
    Compare every label against the ``anchor`` label, per sequence.

    Pairs which cannot be computed are kept with NaN metrics and a ``status``
    reason instead of aborting the whole table.
    """
    clean = _clean(df, rate_col, quality_col)

    rows = []
    for seq, gseq in clean.groupby(seq_col, sort=True):
        base = gseq[gseq[label_col] == anchor]
        anchor_pts = _points(base, rate_col, quality_col)
        for tool, gtool in gseq.groupby(label_col, sort=True):
            if tool == anchor:
                continue
            test_pts = _points(gtool, rate_col, quality_col)
            if base.empty:
                bd_r, bd_p, status = np.nan, np.nan, "no_anchor"
            else:
                bd_r, bd_p, status = _compare(anchor_pts, test_pts, order)
            if status != "ok":
                logger.warning("bd_table: skipped %s / %s (%s)", seq, tool, status)
            rows.append([seq, tool, len(test_pts), bd_r, bd_p, status])

    if not rows:
        return pd.DataFrame(columns=COLUMNS)
    out = pd.DataFrame(rows, columns=COLUMNS)
    return out.sort_values(["seq", "tool"]).reset_index(drop=True)

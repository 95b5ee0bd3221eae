#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 16:40:19 2026

@author: Marcel Hesselberth

Calendar conversions on numpy arrays.
"""

import numpy as np
from gregjd.cnumba import cnjit
from gregjd.constants import JD_MAX, YEAR_MAX
from gregjd.gregorian import cal_to_jd, jd_to_cal


@cnjit
def _cal_to_jd_loop(years, months, days):
    n = years.shape[0]
    jds = np.empty(n, dtype=np.float64)
    for i in range(n):
        jds[i] = cal_to_jd(years[i], months[i], days[i])
    return jds


@cnjit
def _jd_to_cal_loop(jds):
    n = jds.shape[0]
    years = np.empty(n, dtype=np.int64)
    months = np.empty(n, dtype=np.int64)
    days = np.empty(n, dtype=np.float64)
    for i in range(n):
        year, month, day = jd_to_cal(jds[i])
        years[i] = year
        months[i] = month
        days[i] = day
    return years, months, days


def cal_to_jd_array(years, months, days):
    """
    Julian dates of an array of calendar dates.

    The arguments are broadcast against each other, so a scalar year with
    an array of days works.

    Parameters
    ----------
    years : array_like of int

    months : array_like of int
        Months (1-12).
    days : array_like of float
        Days of the month with fraction.

    Raises
    ------
    TypeError
        If years or months are not integers.
    ValueError
        If any month is not in 1..12.
    OverflowError
        If a year is too far from 0.

    Returns
    -------
    numpy.ndarray
        Julian dates (float64) of the broadcast shape.
    """
    years = np.asarray(years)
    months = np.asarray(months)
    if not (np.issubdtype(years.dtype, np.integer)
            and np.issubdtype(months.dtype, np.integer)):
        raise TypeError('years and months must be integers')
    if np.any((months < 1) | (months > 12)):
        raise ValueError('month must be in 1..12')
    if np.any((years < -YEAR_MAX) | (years > YEAR_MAX)):
        raise OverflowError('year must be in -%d..%d' % (YEAR_MAX, YEAR_MAX))
    years, months, days = np.broadcast_arrays(
        years.astype(np.int64), months.astype(np.int64),
        np.asarray(days, dtype=np.float64))
    shape = years.shape
    jds = _cal_to_jd_loop(np.ascontiguousarray(years).ravel(),
                          np.ascontiguousarray(months).ravel(),
                          np.ascontiguousarray(days).ravel())
    return jds.reshape(shape)


def jd_to_cal_array(jds):
    """
    Calendar dates of an array of Julian dates.

    Parameters
    ----------
    jds : array_like of float
        Finite Julian dates.

    Raises
    ------
    ValueError
        If a Julian date is not finite.
    OverflowError
        If abs(jd) > 2**53.

    Returns
    -------
    years, months, days : numpy.ndarray
        int64, int64 and float64 arrays of the same shape as jds.
    """
    jds = np.asarray(jds, dtype=np.float64)
    if not np.all(np.isfinite(jds)):
        raise ValueError('julian dates must be finite')
    if np.any(np.abs(jds) > JD_MAX):
        raise OverflowError('julian date out of range')
    shape = jds.shape
    years, months, days = _jd_to_cal_loop(np.ascontiguousarray(jds).ravel())
    return years.reshape(shape), months.reshape(shape), days.reshape(shape)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 18:21:57 2026

@author: Marcel Hesselberth
"""

import numpy as np
import pytest

from gregjd.vector import cal_to_jd_array, jd_to_cal_array
from gregjd.gregorian import cal_to_jd, jd_to_cal


def test_cal_to_jd_array():
    years  = np.array([1900, 1600, 2000, -4713, 30000])
    months = np.array([3, 3, 1, 11, 1])
    days   = np.array([1, 1, 1.5, 24.5, 1.5])
    jds = cal_to_jd_array(years, months, days)
    assert(jds.dtype == np.float64)
    assert(list(jds) == [2415020.5 + 59, 2305447.5 + 60, 2451545.0, 0.0,
                         12678335.0])


def test_cal_to_jd_array_broadcast():
    days = np.arange(1, 32).reshape(1, 31)
    jds = cal_to_jd_array(2024, np.array([[1], [3]]), days)
    assert(jds.shape == (2, 31))
    assert(jds[0, 0] == 2460310.5)
    assert(jds[1, 0] == 2460370.5)
    assert(np.all(np.diff(jds, axis=1) == 1.0))


def test_cal_to_jd_array_scalar():
    jds = cal_to_jd_array(2000, 1, 1.5)
    assert(jds.shape == ())
    assert(jds == 2451545.0)


def test_cal_to_jd_array_month_range():
    with pytest.raises(ValueError):
        cal_to_jd_array([2000, 2000], [12, 13], [1, 1])
    with pytest.raises(ValueError):
        cal_to_jd_array(2000, 0, 1)


def test_jd_to_cal_array():
    jds = np.array([[0.0, 2451545.0], [12678335.0, -0.5]])
    years, months, days = jd_to_cal_array(jds)
    assert(years.shape == months.shape == days.shape == (2, 2))
    assert(years.dtype == np.int64 and days.dtype == np.float64)
    assert(years.tolist() == [[-4713, 2000], [30000, -4713]])
    assert(months.tolist() == [[11, 1], [1, 11]])
    assert(days.tolist() == [[24.5, 1.5], [1.5, 24.0]])


def test_jd_to_cal_array_not_finite():
    with pytest.raises(ValueError):
        jd_to_cal_array([2451545.0, np.nan])


def test_agrees_with_scalar():
    rng = np.random.default_rng(3760)
    jds = rng.uniform(-1e7, 1e7, 5000)
    years, months, days = jd_to_cal_array(jds)
    for i in range(0, 5000, 50):
        assert((years[i], months[i], days[i]) == jd_to_cal(jds[i]))
    jds2 = cal_to_jd_array(years, months, days)
    for i in range(0, 5000, 50):
        assert(jds2[i] == cal_to_jd(years[i], months[i], days[i]))


def test_cal_to_jd_array_not_integer():
    with pytest.raises(TypeError):
        cal_to_jd_array([2000.7], [2.9], [1])
    with pytest.raises(TypeError):
        cal_to_jd_array([2000], [2.0], [1])
    with pytest.raises(TypeError):
        cal_to_jd_array(2000.0, 1, 1)
    jds = cal_to_jd_array(np.array([2000], dtype=np.int16),
                          np.array([2], dtype=np.uint8), [1])
    assert(jds[0] == 2451575.5)


def test_out_of_range():
    with pytest.raises(OverflowError):
        jd_to_cal_array([2451545.0, 1e25])
    with pytest.raises(OverflowError):
        jd_to_cal_array(-1e25)
    with pytest.raises(OverflowError):
        cal_to_jd_array([2000, 10 ** 18], 1, 1)

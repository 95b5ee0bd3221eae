#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 14:02:51 2026

@author: Marcel Hesselberth

Calendar constants shared by both conversion directions.
"""

import numpy as np

wdays   = { 0:"Sunday", 1:"Monday", 2:"Tuesday", 3:"Wednesday", 4:"Thursday",
            5:"Friday", 6:"Saturday" }

# Month tables as arrays so that numba can freeze them into compiled code.
MONTH_LEN   = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31],
                       dtype=np.int64)
# Explanatory Supplement 1961, page 434
DAYS_BEFORE_MONTH = np.array([0, 31, 59, 90, 120, 151, 181, 212, 243, 273,
                              304, 334], dtype=np.int64)

SHORT_YR    = 365
LONG_YR     = 366
CYCLE_YEARS = 400
CYCLE_DAYS  = (SHORT_YR * CYCLE_YEARS + CYCLE_YEARS // 4 - CYCLE_YEARS // 100
               + CYCLE_YEARS // CYCLE_YEARS)     # 146097

JD_EPOCH     = (-4713, 11, 24.5)   # Gregorian date of JD 0.0
JAN_0_YEAR_0 = 1721058.5           # January 0.0 of year 0 = Dec 31.0 of -1
JAN_1_YEAR_0 = JAN_0_YEAR_0 + 1.0  # start of a 400 year cycle

# Beyond 2**53 a double no longer resolves days. Keeps day counts in int64.
JD_MAX   = 2.0 ** 53
YEAR_MAX = CYCLE_YEARS * int(JD_MAX // CYCLE_DAYS)

MJD0    = 2400000.5            # For computing Modified Julian days
SPD     = 86400                # seconds per day

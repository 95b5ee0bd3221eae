#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 14:31:08 2026

@author: Marcel Hesselberth
"""

from math import floor
from gregjd.constants import (MONTH_LEN, DAYS_BEFORE_MONTH, SHORT_YR, LONG_YR,
                              CYCLE_YEARS, CYCLE_DAYS, JAN_0_YEAR_0,
                              JAN_1_YEAR_0)
from gregjd.cnumba import cnjit

"""
Conversion between the proleptic Gregorian calendar and Julian dates.

The year before +1 is the year 0 (as is usually done in astronomy) and the
Gregorian leap year rule is extended backwards without limit. JD 0.0 is
-4713-11-24.5 in this calendar.

Days are counted from January 0.0, year 0 and rebased to the usual Julian
date origin at the end. A base is a January 1.0 in one of the years
..., -400, 0, 400, ... so that jd_to_cal can jump whole 400 year cycles
before it looks at individual years. All integer divisions round towards
minus infinity, which is what makes negative years work.

The functions in this module do not check their arguments. Months must be
in 1..12, Julian dates must be finite. See gregjd.calendar for the checked
versions.
"""


@cnjit(signature_or_function='boolean(i8)')
def is_leapyear(year:int) -> bool:
    """
    Check if a year is a leap year in the proleptic Gregorian calendar.

    Parameters
    ----------
    year : int
           Astronomical year number, year 0 is 1 BCE (a leap year).

    Returns
    -------
    Boolean
        True if year is a leap year.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@cnjit(signature_or_function='i8(i8, i8)')
def month_length(year:int, month:int) -> int:
    """
    Number of days in a month.

    Parameters
    ----------
    year  : int
    month : int
            Month (1-12).

    Returns
    -------
    int
        28, 29, 30 or 31.
    """
    length = MONTH_LEN[month - 1]
    if month == 2 and is_leapyear(year):
        length += 1
    return length


@cnjit(signature_or_function='i8(i8)')
def days_before_year(year:int) -> int:
    """
    Number of days from January 1.0, year 0 until January 1.0 of year.

    Negative for years before 0. Since the calendar repeats every 400 years
    this is also the number of days in the first `year` years after any base.

    Parameters
    ----------
    year : int

    Returns
    -------
    int
        Day count.
    """
    # leap years in 0..year-1, or minus the leap years in year..-1
    y_p = year - 1
    num_366yrs = y_p // 4 - y_p // 100 + y_p // 400 + 1
    num_365yrs = year - num_366yrs
    return num_365yrs * SHORT_YR + num_366yrs * LONG_YR


@cnjit(signature_or_function='f8(i8, i8, f8)')
def cal_to_jd(year:int, month:int, day:float) -> float:
    """
    Julian date of a proleptic Gregorian calendar date.

    There is no restriction on the year. The day is not checked against
    the length of the month, so (2025, 1, 32) equals (2025, 2, 1).

    Parameters
    ----------
    year  : int
            Year, 0 is 1 BCE.
    month : int
            Month (1-12).
    day   : float
            Day of the month, starting at 1.0. The fraction is the time of
            day (12h = 0.5).

    Returns
    -------
    float
        The Julian date.
    """
    days = days_before_year(year) + DAYS_BEFORE_MONTH[month - 1]
    if month > 2 and is_leapyear(year):
        days += 1
    return days + day + JAN_0_YEAR_0


@cnjit(signature_or_function='Tuple((i8, i8, f8, i8))(f8)')
def _jd_to_cal(jd:float) -> (int, int, float, int):
    """
    jd_to_cal, also returning the number of single-year refinement steps.
    """
    # 1. the base preceding jd
    num_cycles = floor((jd - JAN_1_YEAR_0) / CYCLE_DAYS)
    base_jd = JAN_1_YEAR_0 + num_cycles * CYCLE_DAYS
    # the quotient can round up to the next cycle just below a base
    if jd < base_jd:
        num_cycles -= 1
        base_jd -= CYCLE_DAYS
    elif jd - base_jd >= CYCLE_DAYS:
        num_cycles += 1
        base_jd += CYCLE_DAYS
    year = num_cycles * CYCLE_YEARS
    jd_minus_base = jd - base_jd  # never negative

    # 2. a lower bound for the completed years after the base
    cursor = 0
    more_years = floor(jd_minus_base) // LONG_YR - 1
    if more_years > 0:
        cursor += days_before_year(more_years)  # still on a January 1.0
        year += more_years

    # the remaining years, at most 2
    steps = 0
    for more in range(CYCLE_YEARS):
        if is_leapyear(year):
            year_length = LONG_YR
        else:
            year_length = SHORT_YR
        if cursor + year_length > jd_minus_base:
            break
        cursor += year_length
        year += 1
        steps += 1

    # 3. months and days
    month = 1
    while month < 12:
        mlen = month_length(year, month)
        if cursor + mlen > jd_minus_base:
            break
        cursor += mlen
        month += 1
    day = jd_minus_base - cursor + 1.0
    return year, month, day, steps


@cnjit(signature_or_function='Tuple((i8, i8, f8))(f8)')
def jd_to_cal(jd:float) -> (int, int, float):
    """
    Proleptic Gregorian calendar date of a Julian date.

    cal_to_jd(*jd_to_cal(jd)) == jd and jd_to_cal(cal_to_jd(y, m, d)) is
    (y, m, d) within floating point precision.

    Parameters
    ----------
    jd : float
         Julian date, any finite value.

    Returns
    -------
    year  : int

    month : int

    day   : float
            Day of the month including the day fraction.
    """
    year, month, day, steps = _jd_to_cal(jd)
    return year, month, day

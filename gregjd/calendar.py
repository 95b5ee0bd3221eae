#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 15:12:44 2026

@author: Marcel Hesselberth
"""

import logging
from math import floor, isfinite
from collections import namedtuple
from operator import index as _index
from gregjd.constants import MJD0, SPD, JD_MAX, YEAR_MAX, wdays
from gregjd import gregorian

logger = logging.getLogger(__name__)

CalendarDate = namedtuple("CalendarDate", ["year", "month", "day"])

"""
Checked interface to the proleptic Gregorian calendar.

Years and months must be integers (anything accepted by operator.index),
months must be in 1..12 and Julian dates must be finite. The day of the
month is not checked: (2025, 4, 31) is May 1. The day may have a fraction
(the time of day), so 2000-01-01 12h is (2000, 1, 1.5) and has JD 2451545.0.
"""


def _check_month(year, month):
    year = _index(year)
    month = _index(month)
    if not -YEAR_MAX <= year <= YEAR_MAX:
        raise OverflowError('year must be in -%d..%d' % (YEAR_MAX, YEAR_MAX),
                            year)
    if not 1 <= month <= 12:
        raise ValueError('month must be in 1..12', month)
    return year, month


def _check_jd(jd):
    jd = float(jd)
    if not isfinite(jd):
        raise ValueError('julian date must be finite', jd)
    if abs(jd) > JD_MAX:
        raise OverflowError('julian date out of range', jd)
    return jd


def is_leapyear(year):
    """
    Check if a year is a leap year.

    Parameters
    ----------
    year : int

    Returns
    -------
    Boolean
        True if year is a leap year.
    """
    return bool(gregorian.is_leapyear(_index(year)))


def month_length(year, month):
    """
    Number of days in a month.

    Parameters
    ----------
    year : int

    month : int


    Raises
    ------
    ValueError
        If the month is not in 1..12.

    Returns
    -------
    int
        The number of days.
    """
    year, month = _check_month(year, month)
    return int(gregorian.month_length(year, month))


def JD(year, month, day):
    """
    Julian date of a calendar date.

    Parameters
    ----------
    year : int

    month : int

    day : float
        Day of the month with the time of day as a fraction.

    Raises
    ------
    ValueError
        If the month is not in 1..12.
    OverflowError
        If the year is too far from 0.

    Returns
    -------
    float
        The Julian date.
    """
    year, month = _check_month(year, month)
    jd = float(gregorian.cal_to_jd(year, month, float(day)))
    logger.debug("JD(%d, %d, %r) = %r", year, month, day, jd)
    return jd


def RJD(jd):
    """
    Reverse Julian date.

    Given a JD, compute the calendar date.

    Parameters
    ----------
    jd : float
        Julian date.

    Raises
    ------
    ValueError
        If jd is not finite.
    OverflowError
        If abs(jd) > 2**53.

    Returns
    -------
    CalendarDate
        (year, month, day), day with the time of day as a fraction.
    """
    jd = _check_jd(jd)
    year, month, day = gregorian.jd_to_cal(jd)
    date = CalendarDate(int(year), int(month), float(day))
    logger.debug("RJD(%r) = %s", jd, date)
    return date


def MJD(year, month, day):
    return JD(year, month, day) - MJD0


def RMJD(mjd):
    return RJD(mjd + MJD0)


def day_of_year(year, month, day):
    """
    Ordinal day in the year, January 1 is 1.

    The fraction of day is kept.
    """
    year, month = _check_month(year, month)
    return float(gregorian.cal_to_jd(year, month, float(day))
                 - gregorian.cal_to_jd(year, 1, 0.0))


def weekday(jd):
    """
    The weekday number of the civil day containing jd.

    Parameters
    ----------
    jd : float
        Julian date.

    Returns
    -------
    int
        0: Sunday
        1: Monday
        2: Tuesday
        3: Wednesday
        4: Thursday
        5: Friday
        6: Saturday
    """
    return floor(_check_jd(jd) + 1.5) % 7


def weekday_str(jd):
    """
    The weekday (string) of the civil day containing jd.

    Returns
    -------
    string
        "Sunday" .. "Saturday"
    """
    return wdays[weekday(jd)]


def isoweekday(jd):
    """
    The ISO weekday number of the civil day containing jd.

    Returns
    -------
    int
        1: Monday
        ...
        7: Sunday
    """
    return floor(_check_jd(jd) + 0.5) % 7 + 1


def split_day(day):
    """
    Split a day of the month with fraction into day, hour, minute, second.

    Parameters
    ----------
    day : float
        Day of the month, e.g. 3.578.

    Returns
    -------
    day : int

    hour : int

    minute : int

    second : float
    """
    d = floor(day)
    seconds = (day - d) * SPD
    hour = int(seconds // 3600)
    seconds -= hour * 3600
    minute = int(seconds // 60)
    seconds -= minute * 60
    return d, hour, minute, seconds

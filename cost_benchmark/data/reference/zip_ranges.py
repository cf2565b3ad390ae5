"""
Zip Code Ranges

Maps 5-digit zip prefixes to US states and territories.
Source: https://www.pirateship.com/usps/zone-map

TABLE ORDER MATTERS
-------------------
ZIP_RANGES is evaluated top to bottom and the first matching range wins.
The DC, MD and VA ranges around Washington overlap, so position decides:

    20042           -> VA (single-zip entry listed first, shadows DC 20042-20599)
    20331           -> MD (single-zip entry listed first, shadows DC 20042-20599)
    20043-20167     -> DC (DC 20042-20599 is listed before VA 20040-20167)
    20335-20599     -> DC (DC 20042-20599 is listed before MD 20335-20797)

Only 20040-20042 resolve to VA out of the VA range 20040-20167. The VA
entries 20040-20041 and 20040-20167 overlap each other but agree.

Do not sort this list. Zips matching no range are treated as international.
"""

from enum import Enum
from typing import NamedTuple


class Province(Enum):
    AK = "AK"
    AL = "AL"
    AR = "AR"
    AZ = "AZ"
    CA = "CA"
    CO = "CO"
    CT = "CT"
    DC = "DC"
    DE = "DE"
    FL = "FL"
    GA = "GA"
    HI = "HI"
    IA = "IA"
    ID = "ID"
    IL = "IL"
    IN = "IN"
    KS = "KS"
    KY = "KY"
    LA = "LA"
    MA = "MA"
    MD = "MD"
    ME = "ME"
    MI = "MI"
    MN = "MN"
    MO = "MO"
    MS = "MS"
    MT = "MT"
    NC = "NC"
    ND = "ND"
    NE = "NE"
    NH = "NH"
    NJ = "NJ"
    NM = "NM"
    NV = "NV"
    NY = "NY"
    OH = "OH"
    OK = "OK"
    OR = "OR"
    PA = "PA"
    PR = "PR"
    RI = "RI"
    SC = "SC"
    SD = "SD"
    TN = "TN"
    TX = "TX"
    UT = "UT"
    VA = "VA"
    VT = "VT"
    WA = "WA"
    WI = "WI"
    WV = "WV"
    WY = "WY"


class ZipRange(NamedTuple):
    low: int
    high: int
    province: Province


# (low, high) are inclusive
ZIP_RANGES = [
    ZipRange(20042, 20042, Province.VA),
    ZipRange(20331, 20331, Province.MD),
    ZipRange(99501, 99950, Province.AK),
    ZipRange(35004, 36925, Province.AL),
    ZipRange(71601, 72959, Province.AR),
    ZipRange(75502, 75502, Province.AR),
    ZipRange(85001, 86556, Province.AZ),
    ZipRange(90001, 96162, Province.CA),
    ZipRange(80001, 81658, Province.CO),
    ZipRange(6001, 6389, Province.CT),
    ZipRange(6401, 6928, Province.CT),
    ZipRange(20001, 20039, Province.DC),
    ZipRange(20042, 20599, Province.DC),
    ZipRange(20799, 20799, Province.DC),
    ZipRange(19701, 19980, Province.DE),
    ZipRange(32004, 34997, Province.FL),
    ZipRange(30001, 31999, Province.GA),
    ZipRange(39901, 39901, Province.GA),
    ZipRange(96701, 96898, Province.HI),
    ZipRange(50001, 52809, Province.IA),
    ZipRange(68119, 68120, Province.IA),
    ZipRange(83201, 83876, Province.ID),
    ZipRange(60001, 62999, Province.IL),
    ZipRange(46001, 47997, Province.IN),
    ZipRange(66002, 67954, Province.KS),
    ZipRange(40003, 42788, Province.KY),
    ZipRange(70001, 71232, Province.LA),
    ZipRange(71234, 71497, Province.LA),
    ZipRange(1001, 2791, Province.MA),
    ZipRange(5501, 5544, Province.MA),
    ZipRange(20335, 20797, Province.MD),
    ZipRange(20812, 21930, Province.MD),
    ZipRange(3901, 4992, Province.ME),
    ZipRange(48001, 49971, Province.MI),
    ZipRange(55001, 56763, Province.MN),
    ZipRange(63001, 65899, Province.MO),
    ZipRange(38601, 39776, Province.MS),
    ZipRange(71233, 71233, Province.MS),
    ZipRange(59001, 59937, Province.MT),
    ZipRange(27006, 28909, Province.NC),
    ZipRange(58001, 58856, Province.ND),
    ZipRange(68001, 68118, Province.NE),
    ZipRange(68122, 69367, Province.NE),
    ZipRange(3031, 3897, Province.NH),
    ZipRange(7001, 8989, Province.NJ),
    ZipRange(87001, 88441, Province.NM),
    ZipRange(88901, 89883, Province.NV),
    ZipRange(6390, 6390, Province.NY),
    ZipRange(10001, 14975, Province.NY),
    ZipRange(43001, 45999, Province.OH),
    ZipRange(73001, 73199, Province.OK),
    ZipRange(73401, 74966, Province.OK),
    ZipRange(97001, 97920, Province.OR),
    ZipRange(15001, 19640, Province.PA),
    ZipRange(600, 799, Province.PR),
    ZipRange(900, 999, Province.PR),
    ZipRange(2801, 2940, Province.RI),
    ZipRange(29001, 29948, Province.SC),
    ZipRange(57001, 57799, Province.SD),
    ZipRange(37010, 38589, Province.TN),
    ZipRange(73301, 73301, Province.TX),
    ZipRange(75001, 75501, Province.TX),
    ZipRange(75503, 79999, Province.TX),
    ZipRange(88510, 88589, Province.TX),
    ZipRange(84001, 84784, Province.UT),
    ZipRange(20040, 20041, Province.VA),
    ZipRange(20040, 20167, Province.VA),
    ZipRange(22001, 24658, Province.VA),
    ZipRange(5001, 5495, Province.VT),
    ZipRange(5601, 5907, Province.VT),
    ZipRange(98001, 99403, Province.WA),
    ZipRange(53001, 54990, Province.WI),
    ZipRange(24701, 26886, Province.WV),
    ZipRange(82001, 83128, Province.WY),
]


def find_province(zip_code: int) -> Province | None:
    """First province whose range contains zip_code, or None."""
    for zip_range in ZIP_RANGES:
        if zip_range.low <= zip_code <= zip_range.high:
            return zip_range.province
    return None

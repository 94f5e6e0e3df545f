"""
Closed enumerations used to build QWeather requests.

Each member's value is the exact token sent on the wire, so members can be
passed straight into query parameters and path templates.

Reference: https://dev.qweather.com/docs/resource/
"""

from __future__ import annotations

from enum import Enum

from .config import FREE_API_HOST, STANDARD_API_HOST


class Plan(str, Enum):
    """
    Subscription plan. Each plan is served from its own API host.

    Reference: https://dev.qweather.com/docs/finance/subscription
    """

    FREE = "free"
    STANDARD = "standard"

    @property
    def host(self) -> str:
        return FREE_API_HOST if self is Plan.FREE else STANDARD_API_HOST

    def is_free(self) -> bool:
        return self is Plan.FREE

    def is_standard(self) -> bool:
        return self is Plan.STANDARD


class Lang(str, Enum):
    """Language codes: https://dev.qweather.com/docs/resource/language/"""

    ZH = "zh"
    ZH_HANT = "zh-hant"
    EN = "en"
    DE = "de"
    ES = "es"
    FR = "fr"
    IT = "it"
    JA = "ja"
    KO = "ko"
    RU = "ru"
    HI = "hi"
    TH = "th"
    AR = "ar"
    PT = "pt"
    BN = "bn"
    MS = "ms"
    NL = "nl"
    EL = "el"
    LA = "la"
    SV = "sv"
    ID = "id"
    PL = "pl"
    TR = "tr"
    CS = "cs"
    ET = "et"
    VI = "vi"
    FIL = "fil"
    FI = "fi"
    HE = "he"
    IS = "is"
    NB = "nb"


class Unit(str, Enum):
    """Measurement system: metric or imperial."""

    M = "m"
    I = "i"  # noqa: E741


class CountryCode(str, Enum):
    """ISO 3166 country codes, sent lowercase."""

    AF = "af"
    AX = "ax"
    AL = "al"
    DZ = "dz"
    AS = "as"
    AD = "ad"
    AO = "ao"
    AI = "ai"
    AQ = "aq"
    AG = "ag"
    AR = "ar"
    AM = "am"
    AW = "aw"
    AU = "au"
    AT = "at"
    AZ = "az"
    BS = "bs"
    BH = "bh"
    BD = "bd"
    BB = "bb"
    BY = "by"
    BE = "be"
    BZ = "bz"
    BJ = "bj"
    BM = "bm"
    BT = "bt"
    BO = "bo"
    BQ = "bq"
    BA = "ba"
    BW = "bw"
    BV = "bv"
    BR = "br"
    IO = "io"
    BN = "bn"
    BG = "bg"
    BF = "bf"
    BI = "bi"
    CV = "cv"
    KH = "kh"
    CM = "cm"
    CA = "ca"
    KY = "ky"
    CF = "cf"
    TD = "td"
    CL = "cl"
    CN = "cn"
    CX = "cx"
    CC = "cc"
    CO = "co"
    KM = "km"
    CG = "cg"
    CD = "cd"
    CK = "ck"
    CR = "cr"
    CI = "ci"
    HR = "hr"
    CU = "cu"
    CW = "cw"
    CY = "cy"
    CZ = "cz"
    DK = "dk"
    DJ = "dj"
    DM = "dm"
    DO = "do"
    EC = "ec"
    EG = "eg"
    SV = "sv"
    GQ = "gq"
    ER = "er"
    EE = "ee"
    ET = "et"
    FK = "fk"
    FO = "fo"
    FJ = "fj"
    FI = "fi"
    FR = "fr"
    GF = "gf"
    PF = "pf"
    TF = "tf"
    GA = "ga"
    GM = "gm"
    GE = "ge"
    DE = "de"
    GH = "gh"
    GI = "gi"
    GR = "gr"
    GL = "gl"
    GD = "gd"
    GP = "gp"
    GU = "gu"
    GT = "gt"
    GG = "gg"
    GN = "gn"
    GW = "gw"
    GY = "gy"
    HT = "ht"
    HM = "hm"
    VA = "va"
    HN = "hn"
    HK = "hk"
    HU = "hu"
    IS = "is"
    IN = "in"
    ID = "id"
    IR = "ir"
    IQ = "iq"
    IE = "ie"
    IM = "im"
    IL = "il"
    IT = "it"
    JM = "jm"
    JP = "jp"
    JE = "je"
    JO = "jo"
    KZ = "kz"
    KE = "ke"
    KI = "ki"
    KP = "kp"
    KR = "kr"
    KW = "kw"
    KG = "kg"
    LA = "la"
    LV = "lv"
    LB = "lb"
    LS = "ls"
    LR = "lr"
    LY = "ly"
    LI = "li"
    LT = "lt"
    LU = "lu"
    MO = "mo"
    MK = "mk"
    MG = "mg"
    MW = "mw"
    MY = "my"
    MV = "mv"
    ML = "ml"
    MT = "mt"
    MH = "mh"
    MQ = "mq"
    MR = "mr"
    MU = "mu"
    YT = "yt"
    MX = "mx"
    FM = "fm"
    MD = "md"
    MC = "mc"
    MN = "mn"
    ME = "me"
    MS = "ms"
    MA = "ma"
    MZ = "mz"
    MM = "mm"
    NA = "na"
    NR = "nr"
    NP = "np"
    NL = "nl"
    NC = "nc"
    NZ = "nz"
    NI = "ni"
    NE = "ne"
    NG = "ng"
    NU = "nu"
    NF = "nf"
    MP = "mp"
    NO = "no"
    OM = "om"
    PK = "pk"
    PW = "pw"
    PS = "ps"
    PA = "pa"
    PG = "pg"
    PY = "py"
    PE = "pe"
    PH = "ph"
    PN = "pn"
    PL = "pl"
    PT = "pt"
    PR = "pr"
    QA = "qa"
    RE = "re"
    RO = "ro"
    RU = "ru"
    RW = "rw"
    BL = "bl"
    SH = "sh"
    KN = "kn"
    LC = "lc"
    MF = "mf"
    PM = "pm"
    VC = "vc"
    WS = "ws"
    SM = "sm"
    ST = "st"
    SA = "sa"
    SN = "sn"
    RS = "rs"
    SC = "sc"
    SL = "sl"
    SG = "sg"
    SX = "sx"
    SK = "sk"
    SI = "si"
    SB = "sb"
    SO = "so"
    ZA = "za"
    GS = "gs"
    SS = "ss"
    ES = "es"
    LK = "lk"
    SD = "sd"
    SR = "sr"
    SJ = "sj"
    SZ = "sz"
    SE = "se"
    CH = "ch"
    SY = "sy"
    TW = "tw"
    TJ = "tj"
    TZ = "tz"
    TH = "th"
    TL = "tl"
    TG = "tg"
    TK = "tk"
    TO = "to"
    TT = "tt"
    TN = "tn"
    TR = "tr"
    TM = "tm"
    TC = "tc"
    TV = "tv"
    UG = "ug"
    UA = "ua"
    AE = "ae"
    GB = "gb"
    US = "us"
    UM = "um"
    UY = "uy"
    UZ = "uz"
    VU = "vu"
    VE = "ve"
    VN = "vn"
    VG = "vg"
    VI = "vi"
    WF = "wf"
    EH = "eh"
    YE = "ye"
    ZM = "zm"
    ZW = "zw"


class IndexType(int, Enum):
    """
    Weather life index categories.

    Reference: https://dev.qweather.com/docs/resource/indices-info/
    """

    ALL = 0
    SPORT = 1
    WASH_CAR = 2
    CLOTHING = 3
    FISHING = 4
    UV_RAY = 5
    TRAVEL = 6
    POLLEN_ALLERGY = 7
    COMFORT = 8
    COLD = 9
    AIR_POLLUTION_DIFFUSION_CONDITION = 10
    AIR_CONDITIONER = 11
    SUNGLASSES = 12
    MAKEUP = 13
    DRYING = 14
    TRAFFIC = 15
    SPF = 16


class POIType(str, Enum):
    """Point-of-interest categories searchable through GeoAPI."""

    SCENIC = "scenic"
    CURRENT_STATION = "CSTA"
    TIDE_STATION = "TSTA"


class Basin(str, Enum):
    """
    Ocean basins for tropical cyclones.

    NP: NorthWest Pacific, AL: North Atlantic, EP: Eastern Pacific,
    SP: SouthWestern Pacific, NI: North Indian, SI: South Indian.
    """

    NP = "NP"
    AL = "AL"
    EP = "EP"
    SP = "SP"
    NI = "NI"
    SI = "SI"


# -----------------------------------------------------------------------------
# Time Horizons
# -----------------------------------------------------------------------------


class DayRange(str, Enum):
    """Forecast depth in days. The value is the path suffix."""

    DAY_3 = "3d"
    DAY_7 = "7d"
    DAY_10 = "10d"
    DAY_15 = "15d"
    DAY_30 = "30d"


class HourRange(str, Enum):
    """Forecast depth in hours. The value is the path suffix."""

    HOUR_24 = "24h"
    HOUR_72 = "72h"
    HOUR_168 = "168h"


Horizon = DayRange | HourRange

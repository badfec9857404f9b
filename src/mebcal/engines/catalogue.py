"""
mebcal.engines.catalogue
------------------------
The declarative rule table. Each row is a pure rule; adding or removing an
observance means editing a row here, never the evaluator.

School rows are estimates following the usual Ministry of Education
pattern and may need updating when the academic calendar is published.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import (
    Category,
    FixedGregorian,
    FixedRange,
    HolidayRule,
    LastWeekOfMonth,
    LunarAnchored,
    NthWeekOfMonth,
    NthWeekdayOfMonth,
    WeekContaining,
)
from .weeks import FRIDAY, MONDAY

# Hijri months
SHAWWAL = 10
DHU_AL_HIJJAH = 12


# ============================================================
# OFFICIAL HOLIDAYS
# ============================================================

OFFICIAL_RULES: Tuple[HolidayRule, ...] = (
    FixedGregorian("Yılbaşı", 1, 1),
    FixedGregorian("Ulusal Egemenlik ve Çocuk Bayramı", 4, 23),
    FixedGregorian("Emek ve Dayanışma Günü", 5, 1),
    FixedGregorian("Atatürk'ü Anma, Gençlik ve Spor Bayramı", 5, 19),
    FixedGregorian("Demokrasi ve Milli Birlik Günü", 7, 15),
    FixedGregorian("Zafer Bayramı", 8, 30),
    FixedGregorian("Cumhuriyet Bayramı", 10, 29),
    # 1 Shevval, three days
    LunarAnchored("Ramazan Bayramı", SHAWWAL, 1, span_days=2, eve_name="Ramazan Bayramı Arefesi"),
    # 10 Zilhicce, four days
    LunarAnchored("Kurban Bayramı", DHU_AL_HIJJAH, 10, span_days=3, eve_name="Kurban Bayramı Arefesi"),
)


# ============================================================
# SCHOOL BREAKS (estimates)
# ============================================================

SCHOOL_RULES: Tuple[HolidayRule, ...] = (
    NthWeekdayOfMonth("Yarıyıl Tatili", 1, MONDAY, 4, span_days=13),
    NthWeekdayOfMonth("İkinci Ara Tatil", 4, MONDAY, 2, span_days=4),
    # day after the 2nd Friday of June
    NthWeekdayOfMonth("Yaz Tatili Başlangıcı", 6, FRIDAY, 2, offset_days=1),
    NthWeekdayOfMonth("Okulların Açılması", 9, MONDAY, 2),
    NthWeekdayOfMonth("Birinci Ara Tatil", 11, MONDAY, 2, span_days=4),
)


# ============================================================
# COMMEMORATIVE DAYS AND WEEKS
# ============================================================

COMMEMORATIVE_RULES: Tuple[HolidayRule, ...] = (
    # January
    NthWeekOfMonth("Enerji Tasarrufu Haftası", 1, 2),
    NthWeekOfMonth("Veremle Savaş Eğitimi Haftası", 1, 1),

    # March
    WeekContaining("Yeşilay Haftası", 3, 1),
    NthWeekOfMonth("Girişimcilik Haftası", 3, 1),
    FixedGregorian("8 Mart Dünya Kadınlar Günü", 3, 8),
    FixedRange("Bilim ve Teknoloji Haftası", 3, 8, 7),
    FixedGregorian("12 Mart İstiklâl Marşı'nın Kabulü ve Mehmet Akif Ersoy'u Anma Günü", 3, 12),
    FixedRange("Tüketiciyi Koruma Haftası", 3, 15, 7),
    FixedGregorian("18 Mart Şehitler Günü", 3, 18),
    FixedRange("Yaşlılara Saygı Haftası", 3, 18, 7),
    WeekContaining("Türk Dünyası ve Toplulukları Haftası", 3, 21),
    FixedRange("Orman Haftası", 3, 21, 6),
    LastWeekOfMonth("Kütüphaneler Haftası", 3),

    # April
    FixedRange("Kanser Haftası", 4, 1, 7),
    FixedRange("Turizm Haftası", 4, 15, 8),

    # May
    NthWeekOfMonth("Trafik ve İlkyardım Haftası", 5, 1),
    NthWeekOfMonth("Vakıflar Haftası", 5, 2),
    FixedRange("Engelliler Haftası", 5, 10, 7),
    FixedRange("Müzeler Haftası", 5, 18, 7),

    # September
    NthWeekOfMonth("İlköğretim Haftası", 9, 3),
    FixedGregorian("Gaziler Günü", 9, 19),

    # October
    FixedGregorian("Hayvanları Koruma Günü", 10, 4),
    FixedGregorian("Birleşmiş Milletler Günü", 10, 24),
    FixedRange("Kızılay Haftası", 10, 29, 7),

    # November
    FixedRange("Organ Bağışı ve Nakli Haftası", 11, 3, 7),
    FixedRange("Lösemili Çocuklar Haftası", 11, 2, 7),
    FixedRange("Atatürk Haftası", 11, 10, 7),
    FixedGregorian("Afet Eğitimi Hazırlık Günü", 11, 12),
    FixedGregorian("Dünya Diyabet Günü", 11, 14),
    FixedGregorian("Öğretmenler Günü", 11, 24),
    FixedRange("Ağız ve Diş Sağlığı Haftası", 11, 22, 6),

    # December
    FixedGregorian("Dünya Engelliler Günü", 12, 3),
    WeekContaining("İnsan Hakları ve Demokrasi Haftası", 12, 10),
    FixedRange("Tutum, Yatırım ve Türk Malları Haftası (Yerli Malı Haftası)", 12, 12, 7),
)


CATALOGUE: Tuple[Tuple[Category, Tuple[HolidayRule, ...]], ...] = (
    (Category.OFFICIAL, OFFICIAL_RULES),
    (Category.SCHOOL, SCHOOL_RULES),
    (Category.COMMEMORATIVE, COMMEMORATIVE_RULES),
)

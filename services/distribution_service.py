# Сервісний шар: розподіл зарплати на соціальні внески та податок на доходи
#
# Ставки відповідають законодавству Словенії станом на літо 2025 року,
# структура видатків відповідає даним SURS за 2023 рік.

import logging
import math
from types import MappingProxyType
from typing import Mapping, NamedTuple

from models.distribution import (
    BreakdownEntry,
    ContributionAmounts,
    DistributionReport,
    ErrorResponse,
    TaxAllocations,
)

logger = logging.getLogger(__name__)

INVALID_SALARY_MESSAGE = "Invalid salary values"


class InvalidInputError(ValueError):
    """Зарплата не є скінченним числом або брутто <= 0."""


class ContributionRate(NamedTuple):
    employee: float
    employer: float


# --- 1. Ставки внесків (частка від брутто) ---

CONTRIBUTION_RATES: Mapping[str, ContributionRate] = MappingProxyType({
    "pension": ContributionRate(employee=0.155, employer=0.0885),  # пенсійне та інвалідне
    "health": ContributionRate(employee=0.0636, employer=0.0656),
    "unemployment": ContributionRate(employee=0.0014, employer=0.0006),
    "parental": ContributionRate(employee=0.0010, employer=0.0010),
    "injury": ContributionRate(employee=0.0, employer=0.0053),  # нещасні випадки на роботі
    "long_term_care": ContributionRate(employee=0.01, employer=0.01),  # з липня 2025
})

# Обов'язковий фіксований внесок на охорону здоров'я, євро на місяць (з 2024)
FLAT_HEALTH_CONTRIBUTION = 35.0

# Які ставки входять у кожен внесок зі звіту
CONTRIBUTION_KINDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "pension": ("pension",),
    "health": ("health", "long_term_care"),
    "unemployment": ("unemployment",),
    "parental": ("parental",),
    "injury": ("injury",),
})


# --- 2. Структура державних видатків ---

# Частки загальних видатків держави за функціями (% ВВП / 46.5% ВВП)
GENERAL_EXPENDITURE_SHARES: Mapping[str, float] = MappingProxyType({
    "social_protection": 17.0 / 46.5,
    "health": 7.4 / 46.5,
    "economic_affairs": 6.3 / 46.5,
    "education": 5.4 / 46.5,
    "general_public_services": 4.6 / 46.5,
    "public_order_and_safety": 1.6 / 46.5,
    "recreation_culture_religion": 1.5 / 46.5,
    "defence": 1.2 / 46.5,
    "environmental_protection": 0.9 / 46.5,
    "housing_and_community": 0.5 / 46.5,
})

# SURS публікує підкатегорії як частки від усіх видатків,
# тому нижче нормуємо їх до частки всередині соціального захисту
_SOCIAL_PROTECTION_OF_TOTAL = {
    "sickness_and_disability": 0.05478982029930613,
    "old_age": 0.21217990101140521,
    "survivors": 0.02414123774418658,
    "family_and_children": 0.03907778567808973,
    "unemployment": 0.006608495248408616,
    "housing": 0.0007080530623294946,
    "social_exclusion": 0.021477609557328,
    "research_and_development": 0.0000337168124918807,
    "other": 0.006574778435916736,
}

SOCIAL_PROTECTION_SHARES: Mapping[str, float] = MappingProxyType({
    name: value / math.fsum(_SOCIAL_PROTECTION_OF_TOTAL.values())
    for name, value in _SOCIAL_PROTECTION_OF_TOTAL.items()
})


class ReportCategory(NamedTuple):
    key: str
    label: str
    general: tuple[str, ...]  # функції загальних видатків
    social: tuple[str, ...]  # підкатегорії соціального захисту
    contributions: tuple[str, ...]  # внески, що йдуть напряму в категорію


# Порядок рядків у звіті
REPORT_CATEGORIES: tuple[ReportCategory, ...] = (
    ReportCategory("pensions", "Pensions (old age)", (), ("old_age",), ("pension",)),
    ReportCategory(
        "healthcare",
        "Healthcare & medical system",
        ("health",),
        ("sickness_and_disability",),
        ("health", "injury"),
    ),
    ReportCategory("unemployment", "Unemployment insurance", (), ("unemployment",), ("unemployment",)),
    ReportCategory("familySupport", "Parental & family support", (), ("family_and_children",), ("parental",)),
    ReportCategory(
        "otherSocialProtection",
        "Other social protection",
        (),
        ("survivors", "social_exclusion", "housing", "research_and_development", "other"),
        (),
    ),
    ReportCategory("education", "Education (schools)", ("education",), (), ()),
    ReportCategory("defence", "Defence (army)", ("defence",), (), ()),
    ReportCategory("police", "Police (public order & safety)", ("public_order_and_safety",), (), ()),
    ReportCategory("economicAffairs", "Economic affairs & subsidies", ("economic_affairs",), (), ()),
    ReportCategory("generalPublicServices", "General public services", ("general_public_services",), (), ()),
    ReportCategory("culture", "Culture & recreation", ("recreation_culture_religion",), (), ()),
    ReportCategory("environment", "Environmental protection", ("environmental_protection",), (), ()),
    ReportCategory("housing", "Housing & community amenities", ("housing_and_community",), (), ()),
)


def derive_category_shares() -> dict[str, float]:
    """
    Поєднує дві таблиці видатків у частку податку для кожної категорії звіту.
    Сума часток дорівнює 1.0, бо категорії покривають усі видатки держави.
    """
    social_total = GENERAL_EXPENDITURE_SHARES["social_protection"]
    shares = {}
    for category in REPORT_CATEGORIES:
        share = sum(GENERAL_EXPENDITURE_SHARES[name] for name in category.general)
        share += sum(social_total * SOCIAL_PROTECTION_SHARES[name] for name in category.social)
        shares[category.key] = share
    return shares


CATEGORY_SHARES: Mapping[str, float] = MappingProxyType(derive_category_shares())


def _to_amount(value) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInputError(INVALID_SALARY_MESSAGE)
    if not math.isfinite(amount):
        raise InvalidInputError(INVALID_SALARY_MESSAGE)
    return amount


def calculate_distribution(gross_salary: float, net_salary: float) -> DistributionReport:
    """
    Розкладає брутто-зарплату на внески працівника й роботодавця та
    орієнтовний податок на доходи, а податок розподіляє між статтями
    державних видатків.

    Податок оцінюється як утримана сума (брутто - нетто) мінус внески
    працівника; від'ємний залишок вважається нульовим податком.
    """
    gross = _to_amount(gross_salary)
    net = _to_amount(net_salary)
    if gross <= 0:
        raise InvalidInputError(INVALID_SALARY_MESSAGE)

    # 1. Внески за видами
    amounts = {}
    for kind, rate_names in CONTRIBUTION_KINDS.items():
        amounts[kind] = gross * sum(
            CONTRIBUTION_RATES[name].employee + CONTRIBUTION_RATES[name].employer
            for name in rate_names
        )
    amounts["health"] += FLAT_HEALTH_CONTRIBUTION
    contributions = ContributionAmounts(**amounts)

    # 2. Окремо частка працівника та роботодавця
    employee_total = gross * sum(rate.employee for rate in CONTRIBUTION_RATES.values())
    employee_total += FLAT_HEALTH_CONTRIBUTION
    employer_total = gross * sum(rate.employer for rate in CONTRIBUTION_RATES.values())

    # 3-4. Утримане = внески працівника + податок
    withheld = gross - net
    if not math.isfinite(withheld):
        raise InvalidInputError(INVALID_SALARY_MESSAGE)
    personal_income_tax = max(0.0, withheld - employee_total)

    # 5. Розподіл податку
    allocations = {key: personal_income_tax * share for key, share in CATEGORY_SHARES.items()}

    # 6. Рядки звіту
    breakdown = tuple(
        BreakdownEntry(
            name=category.label,
            amount=sum(amounts[kind] for kind in category.contributions) + allocations[category.key],
        )
        for category in REPORT_CATEGORIES
    )

    total_collected = sum(amounts.values()) + sum(allocations.values())
    # Суми біля межі float можуть переповнитись
    if not math.isfinite(total_collected):
        raise InvalidInputError(INVALID_SALARY_MESSAGE)

    logger.debug(
        f"Distribution for gross={gross} net={net}: tax={personal_income_tax:.2f}, "
        f"total={total_collected:.2f}"
    )

    return DistributionReport(
        gross_salary=gross,
        net_salary=net,
        withheld=withheld,
        employee_contributions=employee_total,
        employer_contributions=employer_total,
        personal_income_tax=personal_income_tax,
        contributions=contributions,
        allocations=TaxAllocations(**allocations),
        breakdown=breakdown,
        total_collected=total_collected,
    )


def compute_distribution(gross_salary: float, net_salary: float) -> DistributionReport | ErrorResponse:
    """
    Те саме, що calculate_distribution, але помилку повертає як {"error": ...}
    замість винятку, щоб роутер сам обрав HTTP-статус.
    """
    try:
        return calculate_distribution(gross_salary, net_salary)
    except InvalidInputError as e:
        return ErrorResponse(error=str(e))

# Pydantic моделі для розподілу зарплати на внески та податок

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # Фронтенд чекає camelCase (grossSalary, netSalary, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ContributionAmounts(_CamelModel):
    pension: float
    health: float  # разом з LTC та фіксованим внеском
    unemployment: float
    parental: float
    injury: float  # лише роботодавець


class BreakdownEntry(_CamelModel):
    name: str
    amount: float


class TaxAllocations(_CamelModel):
    pensions: float
    healthcare: float
    unemployment: float
    family_support: float
    other_social_protection: float
    education: float
    defence: float
    police: float
    economic_affairs: float
    general_public_services: float
    culture: float
    environment: float
    housing: float


class DistributionReport(_CamelModel):
    gross_salary: float
    net_salary: float
    withheld: float
    employee_contributions: float
    employer_contributions: float
    personal_income_tax: float
    contributions: ContributionAmounts
    allocations: TaxAllocations
    breakdown: tuple[BreakdownEntry, ...]  # порядок рядків у звіті
    total_collected: float


class ErrorResponse(BaseModel):
    error: str

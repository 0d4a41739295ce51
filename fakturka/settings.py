from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .env import load_env
from .models import Currency


_DEFAULT_DB_PATH = "./data/fakturka.json"

_PROFILE: Optional["CompanyProfile"] = None


class CompanyProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    address: str = ""
    postcode: str = ""
    city: str = "Warszawa"
    tax_id: str = ""
    email: str = ""
    accounts: Dict[Currency, str] = Field(default_factory=dict)

    def account_for(self, currency: Currency) -> str:
        return self.accounts.get(currency, "")


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def company_profile_from_env() -> CompanyProfile:
    load_env()
    accounts = {
        currency: _env(f"FAKTURKA_ACCOUNT_{currency.value}")
        for currency in Currency
        if _env(f"FAKTURKA_ACCOUNT_{currency.value}")
    }
    return CompanyProfile(
        name=_env("FAKTURKA_SELLER_NAME"),
        address=_env("FAKTURKA_SELLER_ADDRESS"),
        postcode=_env("FAKTURKA_SELLER_POSTCODE"),
        city=_env("FAKTURKA_SELLER_CITY", "Warszawa"),
        tax_id=_env("FAKTURKA_SELLER_TAX_ID"),
        email=_env("FAKTURKA_SELLER_EMAIL"),
        accounts=accounts,
    )


def load_company_profile() -> CompanyProfile:
    """Return the seller profile, reading the environment on first use only."""
    global _PROFILE
    if _PROFILE is None:
        _PROFILE = company_profile_from_env()
    return _PROFILE


def database_path() -> Path:
    load_env()
    return Path(_env("FAKTURKA_DB", _DEFAULT_DB_PATH))

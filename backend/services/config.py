"""
Institution settings printed in every report letterhead.
Values come from the environment (a .env file is loaded by main.py).
"""

import os

from pydantic import BaseModel, ConfigDict

DEFAULT_NAME = "RUMAH SAKIT MUHAMMADIYAH LAMONGAN"
DEFAULT_ADDRESS = "Jl. Jaksa Agung Suprapto No. 76 RT 03 RW 03 Lamongan"
DEFAULT_PHONE = "Telp. 0322-322834 (Hunting) Fax. 0322-314048"


class Institution(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str = ""
    phone: str = ""

    @property
    def contact(self) -> str:
        return ", ".join(part for part in (self.address, self.phone) if part)


def load_institution() -> Institution:
    return Institution(
        name=os.getenv("INSTITUTION_NAME", DEFAULT_NAME).strip(),
        address=os.getenv("INSTITUTION_ADDRESS", DEFAULT_ADDRESS).strip(),
        phone=os.getenv("INSTITUTION_PHONE", DEFAULT_PHONE).strip(),
    )

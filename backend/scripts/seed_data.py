"""
Seed an admin account and sample insurance policies for development.
Run: python -m scripts.seed_data  (from backend/)
"""

import asyncio
from decimal import Decimal

from insurance_management.core.constants import UserRole
from insurance_management.core.security import hash_password
from insurance_management.db.models import Insurance, User
from insurance_management.db.session import async_session
from insurance_management.repositories import InsuranceRepository, UserRepository


SEED_USERS = [
    {
        "email": "admin@insurance.local",
        "password": "admin123",  # Change in production!
        "name": "System Admin",
        "phone": "0900000000",
        "role": UserRole.ADMIN.value,
    },
    {
        "email": "customer@insurance.local",
        "password": "customer123",
        "name": "Demo Customer",
        "phone": "0911111111",
        "role": UserRole.CUSTOMER.value,
    },
]

SEED_INSURANCES = [
    {
        "name": "Bảo hiểm sức khỏe cơ bản",
        "description": "Chi trả viện phí và chi phí điều trị nội trú.",
        "price": Decimal("1500000"),
        "duration_months": 12,
    },
    {
        "name": "Bảo hiểm xe máy",
        "description": "Trách nhiệm dân sự bắt buộc cho xe mô tô.",
        "price": Decimal("66000"),
        "duration_months": 12,
    },
]


async def seed():
    """Insert seed users and policies, skipping rows that already exist."""
    async with async_session() as session:
        users = UserRepository(session)
        for data in SEED_USERS:
            if await users.get_by_email(data["email"]) is not None:
                print(f"  Skipped existing user: {data['email']}")
                continue
            fields = {key: value for key, value in data.items() if key != "password"}
            user = await users.create(User(password=hash_password(data["password"]), **fields))
            print(f"  Created user: {user.email} ({user.role})")

        insurances = InsuranceRepository(session)
        for data in SEED_INSURANCES:
            if await insurances.get_by_name(data["name"]) is not None:
                print(f"  Skipped existing insurance: {data['name']}")
                continue
            insurance = await insurances.create(Insurance(**data))
            print(f"  Created insurance: {insurance.name}")
        await session.commit()
    print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())

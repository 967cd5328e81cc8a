"""Seed a development firm with one application and its workflow template.

Creates (if missing) a firm, an admin and an advisor, a client, the
St. Kitts & Nevis donation program with a five-stage workflow template,
document requirements, one draft application and two requested original
documents. Prints bearer tokens for the admin, advisor and client so the
lifecycle endpoints can be exercised from curl.

Usage:
    python -m scripts.seed_dev_data

Requires: DATABASE_URL and SECRET_KEY (from .env), and: alembic upgrade head.
"""

from __future__ import annotations

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

FIRM_NAME = "Dev Advisory Partners"
APPLICATION_NUMBER = "APP-DEV-0001"

# (stage_order, stage_name, estimated_days, [(document_name, is_required), ...])
STAGES: list[tuple[int, str, int, list[tuple[str, bool]]]] = [
    (1, "Initial Consultation", 7, []),
    (
        2,
        "Document Collection",
        30,
        [
            ("Passport copy", True),
            ("Birth certificate", True),
            ("Proof of address", True),
            ("Reference letter", False),
        ],
    ),
    (3, "Due Diligence", 21, [("Police clearance certificate", True)]),
    (4, "Original Documents Collection", 14, []),
    (5, "Government Submission", 90, [("Signed government forms", True)]),
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _get_or_create_firm(session: AsyncSession):
    from app.infrastructure.persistence.models import Firm

    firm = (
        await session.execute(select(Firm).where(Firm.name == FIRM_NAME))
    ).scalar_one_or_none()
    if firm is None:
        firm = Firm(name=FIRM_NAME)
        session.add(firm)
        await session.commit()
    return firm


async def _get_or_create_user(session: AsyncSession, firm_id: str, email: str, name: str, role: str):
    from app.infrastructure.persistence.models import User

    user = (
        await session.execute(select(User).where(User.email == email))
    ).scalar_one_or_none()
    if user is None:
        user = User(firm_id=firm_id, email=email, name=name, role=role, is_active=True)
        session.add(user)
        await session.commit()
    return user


async def _get_or_create_program(session: AsyncSession):
    from app.infrastructure.persistence.models import (
        CrbiProgram,
        DocumentRequirement,
        WorkflowStage,
        WorkflowTemplate,
    )

    program = (
        await session.execute(
            select(CrbiProgram).where(
                CrbiProgram.country_code == "KN", CrbiProgram.program_type == "donation"
            )
        )
    ).scalar_one_or_none()
    if program is not None:
        return program

    program = CrbiProgram(
        country_code="KN",
        country_name="St. Kitts and Nevis",
        program_type="donation",
        program_name="Sustainable Island State Contribution",
        min_investment=Decimal("250000.00"),
        processing_time_months=6,
    )
    session.add(program)
    await session.flush()

    template = WorkflowTemplate(
        program_id=program.id,
        template_name="St. Kitts Citizenship by Investment",
        description="Standard SISC donation route",
        total_stages=len(STAGES),
        estimated_time_months=6,
        is_active=True,
        version=1,
    )
    session.add(template)
    await session.flush()

    for order, name, days, requirements in STAGES:
        stage = WorkflowStage(
            template_id=template.id,
            stage_order=order,
            stage_name=name,
            estimated_days=days,
            is_required=True,
            can_skip=False,
            auto_progress=False,
        )
        session.add(stage)
        await session.flush()
        for sort_order, (doc_name, required) in enumerate(requirements):
            session.add(
                DocumentRequirement(
                    stage_id=stage.id,
                    document_name=doc_name,
                    is_required=required,
                    sort_order=sort_order,
                )
            )
    await session.commit()
    return program


async def run() -> None:
    _load_env()

    from app.infrastructure.persistence import database as db_mod
    from app.infrastructure.persistence.models import Application, Client, OriginalDocument
    from app.infrastructure.security.jwt import create_advisor_token, create_client_token

    db_mod._ensure_engine()
    if db_mod.AsyncSessionLocal is None:
        print(
            "AsyncSessionLocal not configured. Set DATABASE_URL and run: alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    async with db_mod.AsyncSessionLocal() as session:
        firm = await _get_or_create_firm(session)
        admin = await _get_or_create_user(
            session, firm.id, "admin@dev-advisory.test", "Dana Admin", "admin"
        )
        advisor = await _get_or_create_user(
            session, firm.id, "advisor@dev-advisory.test", "Alex Advisor", "advisor"
        )
        program = await _get_or_create_program(session)

        application = (
            await session.execute(
                select(Application).where(Application.application_number == APPLICATION_NUMBER)
            )
        ).scalar_one_or_none()
        if application is None:
            client = Client(
                firm_id=firm.id,
                first_name="Jordan",
                last_name="Investor",
                email="jordan@example.test",
            )
            session.add(client)
            await session.flush()
            application = Application(
                firm_id=firm.id,
                client_id=client.id,
                program_id=program.id,
                assigned_advisor_id=advisor.id,
                application_number=APPLICATION_NUMBER,
                status="draft",
                priority="medium",
                investment_amount=Decimal("250000.00"),
                investment_type="donation",
            )
            session.add(application)
            await session.flush()
            for doc_name in ("Apostilled birth certificate", "Notarised passport copy"):
                session.add(
                    OriginalDocument(application_id=application.id, document_name=doc_name)
                )
            await session.commit()
            print(f"Created application {APPLICATION_NUMBER} ({application.id})")
        else:
            print(f"Application {APPLICATION_NUMBER} already exists ({application.id})")

        print(f"Admin token:   {create_advisor_token(admin.id, firm.id, admin.role, admin.name)}")
        print(
            f"Advisor token: {create_advisor_token(advisor.id, firm.id, advisor.role, advisor.name)}"
        )
        print(f"Client token:  {create_client_token(application.client_id, firm.id)}")

    await db_mod.dispose_engine()


if __name__ == "__main__":
    asyncio.run(run())

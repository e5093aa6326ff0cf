#!/usr/bin/env python
"""
Create the schema and seed the permission catalog, system roles and,
optionally, an administrator account and demo data.
"""

import argparse
import asyncio
import sys

from sqlalchemy import select


# Add src to path for imports
sys.path.insert(0, "src")

from hireboard.core.auth.backend import hash_password
from hireboard.core.database import Base, async_engine, async_session_factory
from hireboard.core.permissions.catalog import sync_catalog
from hireboard.core.permissions.evaluator import ADMINISTRATOR_ROLE_NAME
from hireboard.core.permissions.models import Role
from hireboard.modules.applications.models import Application  # noqa: F401
from hireboard.modules.email_templates.models import EmailTemplate, TemplateType
from hireboard.modules.email_templates.placeholders import extract_variables
from hireboard.modules.forms.models import FieldType, Form, FormField
from hireboard.modules.jobs.models import Job, JobStatus
from hireboard.modules.jobs.services import generate_embed_code
from hireboard.modules.settings.models import Setting  # noqa: F401
from hireboard.modules.users.models import User


DEMO_FORM_NAME = "Junior Developer Assessment"

# (name, type, subject, body)
DEFAULT_TEMPLATES = [
    (
        "Application Status Update",
        TemplateType.APPLICATION_STATUS,
        "Application Status Update - {{job_title}}",
        "<h2>Application Status Update</h2>\n"
        "<p>Dear {{applicant_name}},</p>\n"
        "<p>We wanted to update you on the status of your application for the position "
        "of <strong>{{job_title}}</strong>.</p>\n"
        "<p><strong>Current Status:</strong> {{status}}</p>\n"
        "{{#if remarks}}<p><strong>Comments:</strong> {{remarks}}</p>{{/if}}\n"
        "<p>Best regards,<br>Job Portal Team</p>",
    ),
    (
        "Application Received",
        TemplateType.APPLICATION_RECEIVED,
        "Application Received - {{job_title}}",
        "<h2>Application Received</h2>\n"
        "<p>Dear {{applicant_name}},</p>\n"
        "<p>Thank you for applying for the position of <strong>{{job_title}}</strong>. "
        "Our team will review your application shortly.</p>\n"
        "<p>Best regards,<br>Job Portal Team</p>",
    ),
    (
        "Admin Notification",
        TemplateType.ADMIN_NOTIFICATION,
        "New Job Application - {{job_title}}",
        "<h2>New Job Application</h2>\n"
        "<p>A new application has been submitted for <strong>{{job_title}}</strong>.</p>\n"
        "<p><strong>Applicant:</strong> {{applicant_name}}</p>\n"
        "<p><strong>Applied on:</strong> {{apply_date}}</p>",
    ),
]


async def create_schema() -> None:
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Schema ready")


async def seed_default(admin_email: str | None, admin_password: str | None) -> None:
    """Sync the catalog and create the administrator account if asked to."""
    async with async_session_factory() as session:
        created = await sync_catalog(session)
        print(
            f"Catalog synced: {created['permissions']} permissions, "
            f"{created['roles']} roles, {created['grants']} grants created"
        )

        if admin_email and admin_password:
            result = await session.execute(select(User).where(User.email == admin_email))
            if result.scalar_one_or_none():
                print(f"User already exists: {admin_email}")
            else:
                result = await session.execute(
                    select(Role).where(Role.name == ADMINISTRATOR_ROLE_NAME)
                )
                admin_role = result.scalar_one()
                session.add(
                    User(
                        email=admin_email,
                        name="Administrator",
                        password_hash=hash_password(admin_password),
                        role_id=admin_role.id,
                        is_active=True,
                    )
                )
                print(f"Created administrator: {admin_email}")

        await session.commit()


async def seed_email_templates() -> None:
    """Create the default notification templates that are missing."""
    async with async_session_factory() as session:
        result = await session.execute(select(EmailTemplate.name))
        existing = set(result.scalars().all())
        created = 0
        for name, template_type, subject, body in DEFAULT_TEMPLATES:
            if name in existing:
                continue
            session.add(
                EmailTemplate(
                    name=name,
                    type=template_type.value,
                    subject=subject,
                    body=body,
                    variables=extract_variables(subject, body),
                )
            )
            created += 1
        await session.commit()
        print(f"Email templates: {created} created")


async def seed_demo() -> None:
    """Create a sample application form and an open job that uses it."""
    async with async_session_factory() as session:
        result = await session.execute(select(Form).where(Form.name == DEMO_FORM_NAME))
        if result.scalar_one_or_none():
            print(f"Demo form already exists: {DEMO_FORM_NAME}")
            return

        fields = [
            ("Full Name", FieldType.TEXT, True),
            ("Email Address", FieldType.EMAIL, True),
            ("Phone Number", FieldType.PHONE, False),
            ("Years of Programming Experience", FieldType.SELECT, False),
            ("Resume", FieldType.FILE, False),
            ("Cover Letter", FieldType.TEXTAREA, False),
        ]
        form = Form(
            name=DEMO_FORM_NAME,
            description="Screening form for junior developer roles",
            is_default=True,
            fields=[
                FormField(
                    field_name=label.lower().replace(" ", "_"),
                    field_type=field_type.value,
                    label=label,
                    options=["0-1", "1-3", "3+"] if field_type is FieldType.SELECT else None,
                    is_required=required,
                    order=index,
                )
                for index, (label, field_type, required) in enumerate(fields)
            ],
        )
        session.add(form)
        await session.flush()

        job = Job(
            title="Junior Python Developer",
            description="Build and maintain backend services for our hiring platform.",
            position="Junior",
            department="Development",
            location="Remote",
            status=JobStatus.ACTIVE.value,
            form_id=form.id,
        )
        session.add(job)
        await session.flush()
        job.embed_code = generate_embed_code(job.id)

        await session.commit()
        print(f"Created demo form and job: {job.title}")


async def main(scenario: str, admin_email: str | None, admin_password: str | None) -> None:
    """Run the seeding based on scenario."""
    await create_schema()
    if scenario == "default":
        await seed_default(admin_email, admin_password)
        await seed_email_templates()
    elif scenario == "demo":
        await seed_default(admin_email, admin_password)
        await seed_email_templates()
        await seed_demo()
    else:
        print(f"Unknown scenario: {scenario}")
        print("Available scenarios: default, demo")
        sys.exit(1)
    await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the database")
    parser.add_argument(
        "--scenario",
        "-s",
        default="default",
        help="Seed scenario to run (default, demo)",
    )
    parser.add_argument("--admin-email", help="Create an administrator with this email")
    parser.add_argument("--admin-password", help="Password for the administrator")
    args = parser.parse_args()

    asyncio.run(main(args.scenario, args.admin_email, args.admin_password))

import importlib.util
from pathlib import Path

import pytest
from sqlalchemy import func, select

from jobboard.models import Category, Company, Job

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "seed_demo_data.py"


@pytest.fixture(scope="module")
def seed_script():
    module_spec = importlib.util.spec_from_file_location("seed_demo_data", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


class TestImportData:

    @pytest.mark.asyncio
    async def test_imports_demo_rows(self, seed_script, session_factory, repository):
        async with session_factory() as session:
            count = await seed_script.import_data(session, seed_script.SEED_DATA)

        data = seed_script.SEED_DATA
        assert count == len(data["categories"]) + len(data["companies"]) + len(data["jobs"])

        jobs = await repository.list_jobs()
        assert jobs[0].title == "Senior Python Engineer"
        assert await repository.count_jobs() == len(data["jobs"])

    @pytest.mark.asyncio
    async def test_second_run_skips_existing_slugs(self, seed_script, session_factory):
        """Categories and companies are matched by slug; only jobs are re-added."""
        async with session_factory() as session:
            await seed_script.import_data(session, seed_script.SEED_DATA)
        async with session_factory() as session:
            count = await seed_script.import_data(session, seed_script.SEED_DATA)

        async with session_factory() as session:
            categories = (await session.execute(select(func.count()).select_from(Category))).scalar()
            companies = (await session.execute(select(func.count()).select_from(Company))).scalar()
            jobs = (await session.execute(select(func.count()).select_from(Job))).scalar()

        assert count == len(seed_script.SEED_DATA["jobs"])
        assert categories == len(seed_script.SEED_DATA["categories"])
        assert companies == len(seed_script.SEED_DATA["companies"])
        assert jobs == 2 * len(seed_script.SEED_DATA["jobs"])

    @pytest.mark.asyncio
    async def test_unknown_company_skipped(self, seed_script, session_factory):
        data = {"jobs": [{"company": "ghost", "title": "Nobody", "apply_url": "https://x.example"}]}

        async with session_factory() as session:
            count = await seed_script.import_data(session, data)

        assert count == 0

from setuptools import setup, find_packages

setup(
    name="revenue_tracker_api",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.115.6",
        "uvicorn>=0.32.1",
        "sqlalchemy[asyncio]>=2.0.36",
        "asyncpg>=0.30.0",
        "python-dotenv>=1.0.1",
        "python-multipart>=0.0.19",
        "alembic>=1.14.0",
        "pydantic[email]>=2.10.3",
        "pydantic-settings>=2.6.1",
        "python-jose[cryptography]>=3.3.0",
        "passlib[bcrypt]==1.7.4",
        "bcrypt>=4.0.1,<4.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.4",
            "pytest-asyncio>=0.24.0",
            "aiosqlite>=0.20.0",
            "httpx>=0.28.1",
        ],
    },
)

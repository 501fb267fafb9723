from setuptools import find_namespace_packages, setup

setup(
    name="lightbnb",
    version="0.1.0",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["lightbnb*"]),
    install_requires=[
        "asgi-correlation-id~=4.3",
        "duckdb>=1.1",
        "fastapi>=0.110",
        "orjson",
        "pydantic>=2.0",
        "pydantic-settings",
    ],
    entry_points={
        "console_scripts": [
            "lightbnb=lightbnb.app:run",
        ],
    },
    extras_require={
        "dev": [
            "pip-tools~=7.4",
        ],
        "test": [
            "httpx",
            "pytest>=8.0",
        ],
        "server": [
            "uvicorn>=0.30.1",
        ],
        "lambda": [
            "mangum~=0.17",
        ],
    },
)

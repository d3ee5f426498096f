from setuptools import setup, find_packages

setup(
    name="mattermost-app-google-drive",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "google-auth",
        "google-auth-oauthlib",
        "google-api-python-client",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="pesobooks",
    version="0.1.0",
    description="Record transactions and build income, balance sheet and cash flow statements",
    author="Your Name",
    author_email="you@example.com",
    url="https://github.com/yourusername/pesobooks",
    packages=find_packages(include=["statement_tracker", "statement_tracker.*"]),
    package_data={"statement_tracker": ["templates/*.html"]},
    python_requires=">=3.10",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "xlsxwriter>=3.0",
        "fastapi>=0.108",
        "jinja2>=3.0",
        "python-multipart>=0.0.6",
        "uvicorn>=0.20",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "openpyxl>=3.0",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "pesobooks=statement_tracker.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

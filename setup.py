"""Setup configuration for TextPolisher package."""
from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read the requirements file
requirements_file = Path(__file__).parent / "textpolisher" / "requirements.txt"
if requirements_file.exists():
    with open(requirements_file, "r", encoding="utf-8") as f:
        install_requires = [line.strip() for line in f if line.strip() and not line.startswith("#")]
else:
    install_requires = [
        "openai>=1.0.0",
        "httpx>=0.23.0",
    ]

test_requires = [
    "pytest>=7.0.0",
    "pytest-cov>=4.0.0",
]

setup(
    name="textpolisher",
    version="1.0.0",
    author="TextPolisher Project",
    author_email="",
    description="Grammar and spelling correction via OpenAI with a deterministic local fallback",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Natural Language :: English",
        "Natural Language :: Polish",
    ],
    keywords="text-correction proofreading grammar spelling openai llm",
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "test": test_requires,
        "dev": test_requires + [
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "textpolisher=textpolisher.main:main",
        ],
    },
    zip_safe=False,
    license="MIT",
)

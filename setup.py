"""
Setup script для модуля textscope
"""

from setuptools import setup, find_packages
from pathlib import Path

# Читаем README для описания
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="textscope",
    version="0.1.0",
    description="Многоаспектный лингвистический анализ английского текста",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.9",
    install_requires=[
        "spacy>=3.5.0",
        "pyyaml>=6.0",
        "python-dotenv>=0.19.0",
        "pandas>=1.5.0",
        "openpyxl>=3.0.0",
        "beautifulsoup4>=4.11.0",
        "python-docx>=0.8.11",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=22.0",
            "flake8>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "textscope=textscope.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)

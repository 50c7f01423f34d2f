# setup.py
from setuptools import setup, find_packages

setup(
    name="link-finder",
    version="1.0.0",
    description="Same-domain link discovery crawler with a headless browser",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"link_finder": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
        "playwright>=1.40",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "link-finder=link_finder.cli:main",
        ],
    },
    python_requires=">=3.11",
)

"""Package metadata for gifscroll.

The Jinja2 page template ships as package data, so ``render_html`` works
from both editable and regular installs.
"""

from setuptools import find_packages, setup

setup(
    name="gifscroll",
    version="0.1.0",
    description="Debounced GIPHY search with an infinite-scrolling GIF feed",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"gifscroll": ["templates/*.html"]},
    include_package_data=True,
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "pytest-asyncio>=0.23",
        ],
    },
)

import logging
import re
import subprocess
from pathlib import Path
from typing import List

from setuptools import setup, find_packages

logger = logging.getLogger(__name__)
console_handler = logging.StreamHandler()

logger.addHandler(console_handler)
logger.setLevel(logging.DEBUG)

ROOT = Path(__file__).parent

TEST_REQUIRES = [
    "pytest>=7.4.0",
    "httpx>=0.25.0",
]


def post_install():
    """Implement post installation routine"""
    with open(ROOT / "requirements.txt") as f:
        install_requires = f.read().splitlines()

    install_requires = check_requirements(install_requires)

    return install_requires


def check_requirements(install_requires: List[str]):
    installed_packages_idx = []
    for idx, package in enumerate(install_requires):
        if "git" in package or "--" in package:
            result = subprocess.run(
                f"pip install {package}", shell=True, capture_output=True, text=True
            )
            logger.info(f"{result.stdout}")
            if result.stderr != "":
                logger.error(f"{result.stderr}")
            installed_packages_idx.append(idx)
    for idx in installed_packages_idx:
        install_requires[idx] = ""
    install_requires = [x for x in install_requires if x.strip() and not x.startswith("#")]
    return install_requires


def get_version():
    file = ROOT / "jira_ai_assistant" / "__init__.py"
    return re.search(
        r'^__version__ *= *[\'"]([^\'"]*)[\'"]', file.read_text(encoding="utf-8"), re.M
    )[1]


setup(
    name="jira_ai_assistant",
    version=get_version(),
    description="Natural-language Jira search with JQL generation, worklog and story point reports",
    zip_safe=False,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=post_install(),
    extras_require={"test": TEST_REQUIRES},
    entry_points={
        "console_scripts": [
            "jira-ai-assistant=jira_ai_assistant.__main__:main",
        ],
    },
)

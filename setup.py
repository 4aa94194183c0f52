# DEPENDENCIES
from setuptools import setup
from setuptools import find_packages


# Read the long description from README.md if it exists

readme_path = "README.md"

try:
    with open(readme_path, "r", encoding="utf-8") as fh:
        long_description = fh.read()

except FileNotFoundError:
    long_description = "Rule-based risk analysis for terms of service and privacy policies"

setup(name                          = "digital-consent-tracker",
      version                       = "1.0.0",
      description                   = "Finds, scores and explains risky clauses in terms of service and privacy policies.",
      long_description              = long_description,
      long_description_content_type = "text/markdown",
      packages                      = find_packages(exclude = ["tests", "tests.*"]),
      py_modules                    = ["app"],
      classifiers                   = ["Development Status :: 4 - Beta",
                                       "Intended Audience :: Legal Industry",
                                       "Operating System :: OS Independent",
                                       "Programming Language :: Python :: 3",
                                       "Programming Language :: Python :: 3.10",
                                       "Programming Language :: Python :: 3.11",
                                      ],
      python_requires               = ">=3.10",
      install_requires              = ["pydantic>=2.5.0",
                                       "pydantic-settings>=2.1.0",
                                      ],
      extras_require                = {"dev" : ["black>=23.10.0", "isort>=5.12.0", "flake8>=6.0.0", "pytest>=7.4.0"],
                                      },
      entry_points                  = {"console_scripts": ["consent-tracker=app:main"]},
      include_package_data          = True,
     )

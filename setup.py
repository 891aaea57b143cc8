"""Mutation Portal packaging."""

import os
from setuptools import find_packages, setup

# allow setup.py to be run from any path
os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

dir_path = os.path.dirname(os.path.realpath(__file__))

with open(os.path.join(dir_path, "./VERSION"), "r") as version_file:
    version = str(version_file.readline()).strip()


setup(
    name="mutation-portal",
    version=version,
    description="Mutation Portal",
    license="Apache License 2.0",
    classifiers=[
        "Environment :: Web Environment",
        "Framework :: Django",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    package_dir={"": "portal"},
    packages=find_packages("portal"),
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "dev": ["django-debug-toolbar==4.4.6", "django-extensions==3.2.3", "ipython"],
        "tests": [
            "pytest==8.3.3",
            "pytest-django==4.9.0",
            "flake8==7.1.1",
            "faker==30.8.0",
            "factory_boy==3.3.1",
            "pytest-cov==5.0.0",
        ],
    },
    install_requires=[
        "django==4.2.16",
        "psycopg2-binary==2.9.9",
        "dj-database-url==2.2.0",
        "django-model-utils==4.5.1",
        "djangorestframework==3.15.2",
        "django-tables2==2.7.0",
        "django-filter==24.3",
        "django-cors-headers==4.4.0",
        "drf-yasg==1.21.8",
        "requests==2.32.3",
        "matplotlib==3.9.2",
        "gunicorn==23.0.0",
        "simple-json-log-formatter==0.5.5",
    ],
)

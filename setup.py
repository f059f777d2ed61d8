"""
setup.py

Установка решателя треугольного Peg Solitaire.

Использование:
    pip install -e .            # пакеты в режиме разработки
    pip install -e .[test]      # плюс pytest
"""

from setuptools import setup

setup(
    name="triangle_solitaire",
    version="1.0.0",
    description="Backtracking solver for 15-hole triangular Peg Solitaire",
    python_requires=">=3.10",
    packages=["core", "solvers", "solutions", "peg_io", "utils"],
    py_modules=["main"],
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "triangle-solitaire=main:main",
        ],
    },
    zip_safe=False,
)

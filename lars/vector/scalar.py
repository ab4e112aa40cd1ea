"""
Scalar — базовый скалярный тип библиотеки.

Псевдоним Python float (IEEE-754 binary64) для точности.
"""

from typing import TypeAlias

Scalar: TypeAlias = float

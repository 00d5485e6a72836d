"""
data.py - Built-in functional area definitions

Per-person minimums (m² / m³) for the fourteen standard habitat area
types, with their classification and neighbour preferences.
"""

from typing import List

from .enums import AreaCategory, AreaPriority, NoiseLevel, PrivacyLevel
from .schema import AdjacencyPreferences, FunctionalAreaType

__all__ = ['FUNCTIONAL_AREAS']


FUNCTIONAL_AREAS: List[FunctionalAreaType] = [
    # =========================================================================
    # LIFE SUPPORT
    # =========================================================================
    FunctionalAreaType(
        id="eclss",
        name="Environmental Control & Life Support",
        category=AreaCategory.LIFE_SUPPORT,
        min_area_per_person=2.0,
        min_volume_per_person=8.0,
        priority=AreaPriority.CRITICAL,
        noise_level=NoiseLevel.MODERATE,
        privacy=PrivacyLevel.PUBLIC,
        adjacency=AdjacencyPreferences.of(
            preferred=["power", "storage"],
            avoided=["sleep", "medical"],
        ),
        description="Air revitalization, water recovery, and waste management systems",
        icon="🌬️",
    ),
    FunctionalAreaType(
        id="waste_management",
        name="Waste Management",
        category=AreaCategory.LIFE_SUPPORT,
        min_area_per_person=1.5,
        min_volume_per_person=6.0,
        priority=AreaPriority.CRITICAL,
        noise_level=NoiseLevel.MODERATE,
        privacy=PrivacyLevel.PRIVATE,
        adjacency=AdjacencyPreferences.of(
            preferred=["eclss", "hygiene"],
            avoided=["galley", "sleep"],
        ),
        description="Waste collection, processing, and disposal systems",
        icon="♻️",
    ),

    # =========================================================================
    # CREW SUPPORT
    # =========================================================================
    FunctionalAreaType(
        id="sleep",
        name="Sleep Quarters",
        category=AreaCategory.CREW_SUPPORT,
        min_area_per_person=4.0,
        min_volume_per_person=12.0,
        priority=AreaPriority.CRITICAL,
        noise_level=NoiseLevel.QUIET,
        privacy=PrivacyLevel.PRIVATE,
        adjacency=AdjacencyPreferences.of(
            preferred=["hygiene", "storage"],
            avoided=["galley", "exercise", "eclss", "waste_management"],
        ),
        description="Individual crew sleep and personal space",
        icon="🛏️",
    ),
    FunctionalAreaType(
        id="hygiene",
        name="Hygiene & Personal Care",
        category=AreaCategory.CREW_SUPPORT,
        min_area_per_person=2.5,
        min_volume_per_person=10.0,
        priority=AreaPriority.HIGH,
        noise_level=NoiseLevel.MODERATE,
        privacy=PrivacyLevel.PRIVATE,
        adjacency=AdjacencyPreferences.of(
            preferred=["sleep", "waste_management"],
            avoided=["galley", "exercise"],
        ),
        description="Bathing, grooming, and personal hygiene facilities",
        icon="🚿",
    ),
    FunctionalAreaType(
        id="exercise",
        name="Exercise & Recreation",
        category=AreaCategory.CREW_SUPPORT,
        min_area_per_person=3.0,
        min_volume_per_person=15.0,
        priority=AreaPriority.HIGH,
        noise_level=NoiseLevel.LOUD,
        privacy=PrivacyLevel.PUBLIC,
        adjacency=AdjacencyPreferences.of(
            preferred=["storage", "galley"],
            avoided=["sleep", "medical", "science"],
        ),
        description="Physical exercise equipment and recreational space",
        icon="🏃",
    ),

    # =========================================================================
    # OPERATIONS
    # =========================================================================
    FunctionalAreaType(
        id="galley",
        name="Food Preparation & Dining",
        category=AreaCategory.OPERATIONS,
        min_area_per_person=2.0,
        min_volume_per_person=8.0,
        priority=AreaPriority.HIGH,
        noise_level=NoiseLevel.MODERATE,
        privacy=PrivacyLevel.PUBLIC,
        adjacency=AdjacencyPreferences.of(
            preferred=["storage", "exercise"],
            avoided=["sleep", "waste_management", "hygiene"],
        ),
        description="Food storage, preparation, and dining facilities",
        icon="🍽️",
    ),
    FunctionalAreaType(
        id="communication",
        name="Communication Center",
        category=AreaCategory.OPERATIONS,
        min_area_per_person=1.5,
        min_volume_per_person=6.0,
        priority=AreaPriority.CRITICAL,
        noise_level=NoiseLevel.QUIET,
        privacy=PrivacyLevel.SEMI_PRIVATE,
        adjacency=AdjacencyPreferences.of(
            preferred=["control", "power"],
            avoided=["exercise", "waste_management"],
        ),
        description="Mission control and communication equipment",
        icon="📡",
    ),
    FunctionalAreaType(
        id="control",
        name="Mission Control",
        category=AreaCategory.OPERATIONS,
        min_area_per_person=2.5,
        min_volume_per_person=10.0,
        priority=AreaPriority.CRITICAL,
        noise_level=NoiseLevel.QUIET,
        privacy=PrivacyLevel.SEMI_PRIVATE,
        adjacency=AdjacencyPreferences.of(
            preferred=["communication", "science"],
            avoided=["exercise", "sleep"],
        ),
        description="Primary mission operations and monitoring",
        icon="🎛️",
    ),

    # =========================================================================
    # MAINTENANCE
    # =========================================================================
    FunctionalAreaType(
        id="maintenance",
        name="Maintenance & Repair",
        category=AreaCategory.MAINTENANCE,
        min_area_per_person=3.0,
        min_volume_per_person=12.0,
        priority=AreaPriority.HIGH,
        noise_level=NoiseLevel.LOUD,
        privacy=PrivacyLevel.PUBLIC,
        adjacency=AdjacencyPreferences.of(
            preferred=["storage", "power"],
            avoided=["sleep", "medical", "science"],
        ),
        description="Equipment maintenance and repair facilities",
        icon="🔧",
    ),
    FunctionalAreaType(
        id="power",
        name="Power Systems",
        category=AreaCategory.MAINTENANCE,
        min_area_per_person=1.0,
        min_volume_per_person=4.0,
        priority=AreaPriority.CRITICAL,
        noise_level=NoiseLevel.MODERATE,
        privacy=PrivacyLevel.PUBLIC,
        adjacency=AdjacencyPreferences.of(
            preferred=["eclss", "communication", "maintenance"],
            avoided=["sleep", "medical"],
        ),
        description="Electrical power generation and distribution",
        icon="⚡",
    ),

    # =========================================================================
    # SCIENCE
    # =========================================================================
    FunctionalAreaType(
        id="science",
        name="Science Laboratory",
        category=AreaCategory.SCIENCE,
        min_area_per_person=4.0,
        min_volume_per_person=16.0,
        priority=AreaPriority.HIGH,
        noise_level=NoiseLevel.QUIET,
        privacy=PrivacyLevel.SEMI_PRIVATE,
        adjacency=AdjacencyPreferences.of(
            preferred=["control", "storage"],
            avoided=["exercise", "maintenance", "waste_management"],
        ),
        description="Research and scientific investigation facilities",
        icon="🔬",
    ),
    FunctionalAreaType(
        id="medical",
        name="Medical Bay",
        category=AreaCategory.SCIENCE,
        min_area_per_person=2.0,
        min_volume_per_person=8.0,
        priority=AreaPriority.HIGH,
        noise_level=NoiseLevel.QUIET,
        privacy=PrivacyLevel.PRIVATE,
        adjacency=AdjacencyPreferences.of(
            preferred=["sleep", "storage"],
            avoided=["exercise", "galley", "waste_management"],
        ),
        description="Medical care and emergency treatment facilities",
        icon="🏥",
    ),

    # =========================================================================
    # STORAGE
    # =========================================================================
    FunctionalAreaType(
        id="storage",
        name="General Storage",
        category=AreaCategory.STORAGE,
        min_area_per_person=2.0,
        min_volume_per_person=8.0,
        priority=AreaPriority.MEDIUM,
        noise_level=NoiseLevel.QUIET,
        privacy=PrivacyLevel.PUBLIC,
        adjacency=AdjacencyPreferences.of(
            preferred=["galley", "maintenance", "eclss"],
            avoided=["sleep", "medical"],
        ),
        description="General equipment and supply storage",
        icon="📦",
    ),
    FunctionalAreaType(
        id="food_storage",
        name="Food Storage",
        category=AreaCategory.STORAGE,
        min_area_per_person=1.5,
        min_volume_per_person=6.0,
        priority=AreaPriority.HIGH,
        noise_level=NoiseLevel.QUIET,
        privacy=PrivacyLevel.PUBLIC,
        adjacency=AdjacencyPreferences.of(
            preferred=["galley", "storage"],
            avoided=["waste_management", "hygiene"],
        ),
        description="Food and consumable supplies storage",
        icon="🥫",
    ),
]

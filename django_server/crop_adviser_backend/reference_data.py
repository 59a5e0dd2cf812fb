"""
Static reference tables for states, their soil profiles and the crop catalogue.

This is the only copy of the seed data; ``seed_services`` is its only consumer.
"""
from crop_adviser_backend.models import Season

REGIONS = [
    {"name": "Punjab", "code": "PB"},
    {"name": "Haryana", "code": "HR"},
    {"name": "Uttar Pradesh", "code": "UP"},
    {"name": "Rajasthan", "code": "RJ"},
    {"name": "Madhya Pradesh", "code": "MP"},
    {"name": "Maharashtra", "code": "MH"},
    {"name": "Gujarat", "code": "GJ"},
    {"name": "Karnataka", "code": "KA"},
    {"name": "Tamil Nadu", "code": "TN"},
    {"name": "Andhra Pradesh", "code": "AP"},
    {"name": "Telangana", "code": "TG"},
    {"name": "West Bengal", "code": "WB"},
    {"name": "Bihar", "code": "BR"},
    {"name": "Odisha", "code": "OR"},
]

SOIL_TYPES_BY_REGION_CODE = {
    "PB": [
        {"name": "Alluvial Soil", "description": "Fertile soil rich in potash, phosphoric acid, and lime", "phRange": "6.5-7.5", "characteristics": "High fertility, good water retention"},
        {"name": "Sandy Loam", "description": "Well-drained soil with good aeration", "phRange": "6.0-7.0", "characteristics": "Good drainage, moderate fertility"},
    ],
    "HR": [
        {"name": "Alluvial Soil", "description": "Rich in nutrients, suitable for wheat and rice", "phRange": "6.5-7.5", "characteristics": "High fertility, good water retention"},
        {"name": "Sandy Soil", "description": "Light textured soil with good drainage", "phRange": "6.0-7.0", "characteristics": "Quick drainage, low water retention"},
    ],
    "UP": [
        {"name": "Alluvial Soil", "description": "Most fertile soil in the Gangetic plains", "phRange": "6.5-7.5", "characteristics": "Very high fertility, excellent for crops"},
        {"name": "Black Cotton Soil", "description": "Rich in iron, lime, and alumina", "phRange": "7.5-8.5", "characteristics": "High water retention, suitable for cotton"},
    ],
    "RJ": [
        {"name": "Desert Soil", "description": "Arid soil with low organic content", "phRange": "7.0-8.5", "characteristics": "Low fertility, requires irrigation"},
        {"name": "Alluvial Soil", "description": "Found in eastern parts of Rajasthan", "phRange": "6.5-7.5", "characteristics": "Moderate fertility, good for irrigation farming"},
    ],
    "MP": [
        {"name": "Black Cotton Soil", "description": "Regur soil, rich in iron and alumina", "phRange": "7.5-8.5", "characteristics": "High water retention, fertile"},
        {"name": "Red and Yellow Soil", "description": "Formed by weathering of crystalline rocks", "phRange": "5.5-6.5", "characteristics": "Moderate fertility, good for pulses"},
    ],
}

DEFAULT_SOIL_TYPES = [
    {"name": "Alluvial Soil", "description": "General fertile soil", "phRange": "6.5-7.5", "characteristics": "Good fertility"},
    {"name": "Red Soil", "description": "Common in many regions", "phRange": "5.5-6.5", "characteristics": "Moderate fertility"},
]

CROPS = [
    {
        "name": "Rice",
        "season": Season.Kharif.value,
        "description": "Staple food crop requiring flooded fields",
        "expectedYield": "45 quintals/acre",
        "growthDuration": 120,
        "waterRequirement": "High",
        "soilCompatibility": ["Alluvial Soil", "Clay Soil"],
        "image": "rice.jpg",
    },
    {
        "name": "Wheat",
        "season": Season.Rabi.value,
        "description": "Major cereal crop grown in winter season",
        "expectedYield": "38 quintals/acre",
        "growthDuration": 150,
        "waterRequirement": "Moderate",
        "soilCompatibility": ["Alluvial Soil", "Sandy Loam"],
        "image": "wheat.jpg",
    },
    {
        "name": "Cotton",
        "season": Season.Kharif.value,
        "description": "Cash crop requiring warm climate",
        "expectedYield": "25 quintals/acre",
        "growthDuration": 180,
        "waterRequirement": "Moderate",
        "soilCompatibility": ["Black Cotton Soil"],
        "image": "cotton.jpg",
    },
    {
        "name": "Sugarcane",
        "season": Season.Perennial.value,
        "description": "Long duration cash crop",
        "expectedYield": "500 quintals/acre",
        "growthDuration": 365,
        "waterRequirement": "High",
        "soilCompatibility": ["Alluvial Soil", "Red Soil"],
        "image": "sugarcane.jpg",
    },
]

IRRIGATION_ADVICE = {
    "Rice": "Maintain 2-3 inches of standing water throughout growing season",
    "Wheat": "Apply irrigation at critical stages: crown root initiation, tillering, flowering",
    "Cotton": "Deep watering every 7-10 days during flowering and boll formation",
    "Sugarcane": "Regular irrigation every 7-15 days depending on soil moisture",
}
DEFAULT_IRRIGATION_ADVICE = "Follow standard irrigation practices for your region"

FERTILIZER_ADVICE = {
    "Rice": "Apply nitrogen in splits: 50% at transplanting, 25% at tillering, 25% at panicle initiation",
    "Wheat": "Apply NPK fertilizers at sowing and top-dress with nitrogen at tillering",
    "Cotton": "Heavy potash requirement during boll formation stage",
    "Sugarcane": "High nitrogen requirement, apply in multiple splits",
}
DEFAULT_FERTILIZER_ADVICE = "Apply balanced NPK fertilizers as per soil test"

PEST_CONTROL_ADVICE = {
    "Rice": "Monitor for brown plant hopper, stem borer, and blast disease",
    "Wheat": "Watch for aphids, rust diseases, and termites",
    "Cotton": "Control bollworm, whitefly, and pink bollworm",
    "Sugarcane": "Prevent borer attacks and red rot disease",
}
DEFAULT_PEST_CONTROL_ADVICE = "Regular monitoring for pests and diseases"

# Placeholder five day outlook served with every synthesized snapshot
FORECAST = [
    {"day": "Today", "temp": "28°", "condition": "Sunny", "icon": "sun"},
    {"day": "Tomorrow", "temp": "26°", "condition": "Partly Cloudy", "icon": "cloud-sun"},
    {"day": "Wed", "temp": "24°", "condition": "Light Rain", "icon": "cloud-rain"},
    {"day": "Thu", "temp": "23°", "condition": "Cloudy", "icon": "cloud"},
    {"day": "Fri", "temp": "27°", "condition": "Sunny", "icon": "sun"},
]


def get_soil_types_for_region_code(region_code: str) -> list[dict]:
    return SOIL_TYPES_BY_REGION_CODE.get(region_code, DEFAULT_SOIL_TYPES)

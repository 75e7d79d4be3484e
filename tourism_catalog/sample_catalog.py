"""Bundled catalog used when no catalog API is configured."""

from tourism_catalog.schemas.catalog import ITEM_MODELS, TAB_ITEM_KIND, CatalogItem, Tab

SAMPLE_TOURS = [
    {
        "id": "1",
        "title": "Everest Base Camp Trek",
        "destination": "Everest Region",
        "duration": {"days": 14, "nights": 13},
        "price": {"adult": 1500, "child": 1200, "currency": "USD"},
        "images": [{"url": "/images/everest.jpg", "alt": "Everest Base Camp"}],
        "rating": 4.8,
        "reviewCount": 245,
        "featured": True,
        "category": "trekking",
        "difficulty": "challenging",
        "shortDescription": "Experience the world's highest peak with our expert guides",
    },
    {
        "id": "2",
        "title": "Annapurna Circuit Trek",
        "destination": "Annapurna Region",
        "duration": {"days": 12, "nights": 11},
        "price": {"adult": 1200, "child": 900, "currency": "USD"},
        "images": [{"url": "/images/annapurna.jpg", "alt": "Annapurna Circuit"}],
        "rating": 4.7,
        "reviewCount": 189,
        "category": "trekking",
        "difficulty": "moderate",
        "shortDescription": "Classic trek through diverse landscapes and cultures",
    },
    {
        "id": "3",
        "title": "Chitwan Wildlife Safari",
        "destination": "Chitwan National Park",
        "duration": {"days": 3, "nights": 2},
        "price": {"adult": 350, "child": 200, "currency": "USD"},
        "images": [{"url": "/images/chitwan.jpg", "alt": "Chitwan Safari"}],
        "rating": 4.5,
        "reviewCount": 156,
        "category": "wildlife",
        "difficulty": "easy",
        "shortDescription": "Spot rhinos, tigers, and exotic wildlife",
    },
]

SAMPLE_HOMESTAYS = [
    {
        "id": "1",
        "name": "Hotel Yak & Yeti",
        "location": {"city": "Kathmandu", "address": "Durbar Marg"},
        "starRating": 5,
        "rating": 4.6,
        "reviewCount": 1234,
        "featured": True,
        "images": [{"url": "/images/hotel-yak-yeti.jpg", "alt": "Hotel Yak & Yeti"}],
        "category": "luxury",
        "rooms": [{"type": "Deluxe Room", "pricePerNight": 180}],
    },
    {
        "id": "2",
        "name": "Temple Tree Resort",
        "location": {"city": "Pokhara", "address": "Lakeside"},
        "starRating": 4,
        "rating": 4.4,
        "reviewCount": 567,
        "images": [{"url": "/images/temple-tree.jpg", "alt": "Temple Tree Resort"}],
        "category": "resort",
        "rooms": [{"type": "Garden View Room", "pricePerNight": 120}],
    },
]

SAMPLE_ACTIVITIES = [
    {
        "id": "1",
        "title": "Paragliding in Pokhara",
        "location": {"name": "Pokhara"},
        "duration": {"hours": 3, "type": "half-day"},
        "price": {"amount": 85, "currency": "USD"},
        "images": [{"url": "/images/paragliding.jpg", "alt": "Paragliding"}],
        "rating": 4.7,
        "reviewCount": 89,
        "featured": True,
        "category": "adventure",
        "difficulty": "moderate",
        "shortDescription": "Soar above the beautiful Phewa Lake",
    },
    {
        "id": "2",
        "title": "Kathmandu Valley Cultural Tour",
        "location": {"name": "Kathmandu"},
        "duration": {"hours": 8, "type": "full-day"},
        "price": {"amount": 65, "currency": "USD"},
        "images": [{"url": "/images/cultural-tour.jpg", "alt": "Cultural Tour"}],
        "rating": 4.5,
        "reviewCount": 134,
        "category": "cultural",
        "difficulty": "easy",
        "shortDescription": "Explore UNESCO World Heritage Sites",
    },
]

SAMPLE_EVENTS = [
    {
        "id": "1",
        "title": "Dashain Festival Celebration",
        "location": {"name": "Kathmandu"},
        "duration": {"hours": 6, "type": "full-day"},
        "price": {"amount": 35, "currency": "USD"},
        "images": [{"url": "/images/dashain-festival.jpg", "alt": "Dashain Festival"}],
        "rating": 4.8,
        "reviewCount": 156,
        "category": "cultural",
        "difficulty": "easy",
        "shortDescription": "Experience Nepal's biggest festival celebration",
    },
    {
        "id": "2",
        "title": "Holi Color Festival",
        "location": {"name": "Bhaktapur"},
        "duration": {"hours": 4, "type": "half-day"},
        "price": {"amount": 25, "currency": "USD"},
        "images": [{"url": "/images/holi-festival.jpg", "alt": "Holi Festival"}],
        "rating": 4.7,
        "reviewCount": 89,
        "category": "cultural",
        "difficulty": "easy",
        "shortDescription": "Join the vibrant festival of colors",
    },
    {
        "id": "3",
        "title": "Mountain Music Festival",
        "location": {"name": "Pokhara"},
        "duration": {"hours": 8, "type": "full-day"},
        "price": {"amount": 45, "currency": "USD"},
        "images": [{"url": "/images/mountain-music.jpg", "alt": "Mountain Music Festival"}],
        "rating": 4.6,
        "reviewCount": 67,
        "featured": True,
        "category": "music",
        "difficulty": "easy",
        "shortDescription": "Live music with stunning mountain backdrop",
    },
]

_SAMPLES_BY_TAB = {
    Tab.tours: SAMPLE_TOURS,
    Tab.homestay: SAMPLE_HOMESTAYS,
    Tab.activities: SAMPLE_ACTIVITIES,
    Tab.events: SAMPLE_EVENTS,
}


def sample_collection(tab: Tab) -> list[CatalogItem]:
    model = ITEM_MODELS[TAB_ITEM_KIND[tab]]
    return [model.model_validate(row) for row in _SAMPLES_BY_TAB[tab]]

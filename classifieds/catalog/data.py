"""Static catalog tables: category tree, location hierarchy and seed listings."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

CATEGORIES: list[dict] = [
    {
        "id": "community",
        "name": "Community",
        "subcategories": [
            {"id": "community-activities", "name": "Activities"},
            {"id": "community-artists", "name": "Artists"},
            {"id": "community-childcare", "name": "Childcare"},
            {"id": "community-classes", "name": "Classes"},
            {"id": "community-events", "name": "Events"},
            {"id": "community-pets", "name": "Pets"},
            {"id": "community-rideshare", "name": "Rideshare"},
            {"id": "community-volunteers", "name": "Volunteers"},
        ],
    },
    {
        "id": "housing",
        "name": "Housing",
        "subcategories": [
            {"id": "housing-apartments", "name": "Apartments/Housing"},
            {"id": "housing-office", "name": "Office/Commercial"},
            {"id": "housing-rooms", "name": "Rooms/Shared"},
            {"id": "housing-sublets", "name": "Sublets/Temporary"},
            {"id": "housing-vacation", "name": "Vacation Rentals"},
        ],
    },
    {
        "id": "jobs",
        "name": "Jobs",
        "subcategories": [
            {"id": "jobs-admin", "name": "Admin/Office"},
            {"id": "jobs-customer-service", "name": "Customer Service"},
            {"id": "jobs-labor", "name": "General Labor"},
            {"id": "jobs-marketing", "name": "Marketing"},
            {"id": "jobs-sales", "name": "Sales"},
            {"id": "jobs-software", "name": "Software/QA/DBA"},
            {"id": "jobs-writing-editing", "name": "Writing/Editing"},
        ],
    },
    {
        "id": "for-sale",
        "name": "For Sale",
        "subcategories": [
            {"id": "for-sale-antiques", "name": "Antiques"},
            {"id": "for-sale-appliances", "name": "Appliances"},
            {"id": "for-sale-cars-trucks", "name": "Cars & Trucks"},
            {"id": "for-sale-electronics", "name": "Electronics"},
            {"id": "for-sale-fashion", "name": "Fashion"},
            {"id": "for-sale-furniture", "name": "Furniture"},
            {"id": "for-sale-home-garden", "name": "Home & Garden"},
            {"id": "for-sale-sporting", "name": "Sporting Goods"},
            {"id": "for-sale-toys-games", "name": "Toys & Games"},
        ],
    },
    {
        "id": "services",
        "name": "Services",
        "subcategories": [
            {"id": "services-automotive", "name": "Automotive"},
            {"id": "services-beauty", "name": "Beauty"},
            {"id": "services-computer", "name": "Computer"},
            {"id": "services-creative", "name": "Creative"},
            {"id": "services-event", "name": "Event"},
            {"id": "services-financial", "name": "Financial"},
            {"id": "services-household", "name": "Household"},
            {"id": "services-legal", "name": "Legal"},
            {"id": "services-pet", "name": "Pet"},
        ],
    },
    {
        "id": "gigs",
        "name": "Gigs",
        "subcategories": [
            {"id": "gigs-computer", "name": "Computer"},
            {"id": "gigs-creative", "name": "Creative"},
            {"id": "gigs-crew", "name": "Crew"},
            {"id": "gigs-domestic", "name": "Domestic"},
            {"id": "gigs-event", "name": "Event"},
            {"id": "gigs-labor", "name": "Labor"},
        ],
    },
]

# country -> state/region -> cities (LGAs for Nigeria)
LOCATIONS: dict[str, dict[str, list[str]]] = {
    "Nigeria": {
        "Lagos": ["Ikeja", "Eti Osa", "Lagos Mainland", "Lekki", "Surulere", "Victoria Island"],
        "FCT": ["Abuja Municipal Area Council", "Central Business District", "Garki", "Wuse", "Maitama"],
        "Rivers": ["Port Harcourt", "Obio-Akpor", "Bonny"],
        "Kano": ["Kano Municipal", "Fagge", "Nassarawa"],
        "Oyo": ["Ibadan North", "Ibadan South-West", "Ogbomosho North"],
        "Kaduna": ["Kaduna North", "Kaduna South", "Zaria"],
    },
    "Ghana": {
        "Greater Accra": ["Accra", "Tema", "Madina"],
        "Ashanti": ["Kumasi", "Obuasi"],
        "Northern": ["Tamale", "Yendi"],
        "Western": ["Takoradi"],
    },
    "Kenya": {
        "Nairobi": ["Kilimani", "Westlands", "Karen", "Kasarani"],
        "Mombasa": ["Nyali", "Likoni"],
        "Kisumu": ["Kisumu Central"],
    },
    "Egypt": {
        "Cairo": ["Zamalek", "Maadi", "New Cairo", "Heliopolis"],
        "Alexandria": ["Smouha", "Roushdy", "Montaza"],
        "Giza": ["Giza", "6th of October City"],
    },
    "South Africa": {
        "Gauteng": ["Johannesburg", "Pretoria", "Sandton", "Soweto"],
        "Western Cape": ["Cape Town", "Stellenbosch", "George"],
        "KwaZulu-Natal": ["Durban", "Pietermaritzburg", "Richards Bay"],
        "Eastern Cape": ["Port Elizabeth", "East London"],
    },
    "Cameroon": {
        "Littoral": ["Douala"],
        "Centre": ["Yaoundé"],
        "Northwest": ["Bamenda"],
    },
}

SELLERS: dict[str, dict] = {
    "john": {"id": "john.doe@example.com", "name": "John Doe", "join_date": "2023-01-15T10:00:00Z"},
    "jane": {"id": "jane.smith@example.com", "name": "Jane Smith", "join_date": "2023-02-20T11:30:00Z"},
    "bayo": {"id": "bayo.adekunle@example.com", "name": "Bayo Adekunle", "join_date": "2023-03-10T09:00:00Z"},
}


def _days_ago(days: int) -> datetime:
    return datetime.now(tz=timezone.utc) - timedelta(days=days)


def sample_listings() -> list[dict]:
    """Seed listings, newest first, with post dates relative to now."""

    return [
        {
            "id": "1",
            "title": "Slightly Used Toyota Camry 2018",
            "description": "Very clean, accident-free Toyota Camry. Buy and drive.",
            "price": "₦12,500,000",
            "category_id": "for-sale-cars-trucks",
            "location": {"country": "Nigeria", "state": "Lagos", "city": "Ikeja"},
            "image_urls": ["https://i.ibb.co/6rC6PzT/camry.jpg"],
            "seller": SELLERS["john"],
            "post_date": _days_ago(1),
            "featured": True,
        },
        {
            "id": "2",
            "title": "3 Bedroom Flat for Rent in Lekki Phase 1",
            "description": (
                "A spacious and well-maintained 3 bedroom flat with all rooms en-suite, "
                "fitted kitchen, and ample parking space."
            ),
            "price": "₦5,000,000 / year",
            "category_id": "housing-apartments",
            "location": {"country": "Nigeria", "state": "Lagos", "city": "Eti Osa"},
            "image_urls": ["https://i.ibb.co/3YYxWbF/apartment.jpg"],
            "seller": SELLERS["jane"],
            "post_date": _days_ago(2),
        },
        {
            "id": "3",
            "title": "Brand New iPhone 14 Pro Max",
            "description": "256GB, Deep Purple, sealed in box. USA spec.",
            "price": "₦950,000",
            "category_id": "for-sale-electronics",
            "location": {"country": "Nigeria", "state": "FCT", "city": "Abuja Municipal Area Council"},
            "image_urls": ["https://i.ibb.co/D8d3smJ/iphone.jpg"],
            "seller": SELLERS["bayo"],
            "post_date": _days_ago(3),
        },
        {
            "id": "4",
            "title": "Senior Frontend Engineer (React)",
            "description": (
                "We are looking for an experienced Frontend Engineer to join our team. "
                "Must be proficient in React, TypeScript, and modern CSS."
            ),
            "price": "Competitive Salary",
            "category_id": "jobs-software",
            "location": {"country": "Nigeria", "state": "Lagos", "city": "Lagos Mainland"},
            "image_urls": ["https://i.ibb.co/L9jBwLw/job.jpg"],
            "seller": SELLERS["jane"],
            "post_date": _days_ago(4),
        },
        {
            "id": "5",
            "title": "New In Box Hisense 55\" Smart TV",
            "description": "Brand new Hisense 55 inch 4K Smart TV. Still in the sealed box. Comes with a 1-year warranty.",
            "price": "₦280,000",
            "category_id": "for-sale-electronics",
            "location": {"country": "Nigeria", "state": "FCT", "city": "Wuse"},
            "image_urls": ["https://picsum.photos/seed/hisensetv/400/300"],
            "seller": SELLERS["bayo"],
            "post_date": _days_ago(4),
            "featured": True,
        },
        {
            "id": "6",
            "title": "Quality Leather Sofa Set",
            "description": (
                "A 7-seater leather sofa, barely used. Very comfortable and stylish. "
                "Selling because I am relocating."
            ),
            "price": "₦450,000",
            "category_id": "for-sale-furniture",
            "location": {"country": "Nigeria", "state": "Oyo", "city": "Ibadan North"},
            "image_urls": ["https://i.ibb.co/Jqj8pCF/sofa.jpg"],
            "seller": SELLERS["john"],
            "post_date": _days_ago(5),
            "featured": True,
        },
    ]

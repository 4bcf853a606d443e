from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Subcategory(BaseModel):
    id: str
    name: str


class Category(BaseModel):
    id: str
    name: str
    subcategories: list[Subcategory] = Field(default_factory=list)


class ListingLocation(BaseModel):
    country: str = ""
    state: str = ""
    city: str = ""


class Seller(BaseModel):
    id: str
    name: str = ""
    join_date: str = ""


class Listing(BaseModel):
    id: str
    title: str
    description: str = ""
    # Display string ("₦350,000", "Request a Quote"), never parsed.
    price: str = ""
    category_id: str
    location: ListingLocation
    image_urls: list[str] = Field(default_factory=list)
    seller: Seller
    post_date: datetime
    featured: bool = False


class FilterState(BaseModel):
    search_term: str = ""
    main_category: Optional[str] = None
    sub_category: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    active_facets: list[str] = Field(default_factory=list)


class SavedSearchLocation(BaseModel):
    state: str = ""
    city: str = ""


class SavedSearchCategory(BaseModel):
    main: Optional[str] = None
    sub: Optional[str] = None


class SavedSearch(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    search_term: str = Field(default="", alias="searchTerm")
    location: SavedSearchLocation = Field(default_factory=SavedSearchLocation)
    category: SavedSearchCategory = Field(default_factory=SavedSearchCategory)
    filters: list[str] = Field(default_factory=list)

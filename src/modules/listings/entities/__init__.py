from src.modules.listings.entities.listing_entity import ListingEntity, generate_listing_id

Listing = ListingEntity

__all__ = ["Listing", "ListingEntity", "generate_listing_id"]

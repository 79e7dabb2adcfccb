from src.modules.listings.dtos.listing import ListingView
from src.modules.listings.entities import Listing


def to_listing_view(listing: Listing) -> ListingView:
    return ListingView(
        id=listing.id,
        id_owner=listing.id_owner,
        name=listing.name,
        address=listing.address,
        price=listing.price,
        image_url=listing.image_url,
    )

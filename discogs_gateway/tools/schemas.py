"""Parameter schemas for the Discogs tools."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SortOrder = Literal["asc", "desc"]
CurrencyCode = Literal["USD", "GBP", "EUR", "CAD", "AUD", "JPY", "CHF", "MXN", "BRL", "NZD", "SEK", "ZAR"]


class ToolParameters(BaseModel):
    """Base class for tool arguments; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class PaginationParams(ToolParameters):
    page: Optional[int] = Field(default=None, ge=1, description="Page number (1-based)")
    per_page: Optional[int] = Field(default=None, ge=1, le=100, description="Items per page (max 100)")


class SearchParams(PaginationParams):
    q: Optional[str] = Field(default=None, description="Free-text search query")
    type: Optional[Literal["release", "master", "artist", "label"]] = Field(
        default=None, description="Restrict results to one entity type"
    )
    title: Optional[str] = Field(default=None, description="Combined 'Artist - Title' search")
    release_title: Optional[str] = Field(default=None, description="Release title")
    artist: Optional[str] = Field(default=None, description="Artist name")
    label: Optional[str] = Field(default=None, description="Label name")
    genre: Optional[str] = Field(default=None, description="Genre, e.g. 'Rock'")
    style: Optional[str] = Field(default=None, description="Style, e.g. 'Prog Rock'")
    country: Optional[str] = Field(default=None, description="Release country")
    year: Optional[str] = Field(default=None, description="Release year")
    format: Optional[str] = Field(default=None, description="Release format, e.g. 'Vinyl'")
    catno: Optional[str] = Field(default=None, description="Catalog number")
    barcode: Optional[str] = Field(default=None, description="Barcode")
    track: Optional[str] = Field(default=None, description="Track title")


class ArtistParams(ToolParameters):
    artist_id: int = Field(..., ge=1, description="Discogs artist ID")


class ArtistReleasesParams(PaginationParams):
    artist_id: int = Field(..., ge=1, description="Discogs artist ID")
    sort: Optional[Literal["year", "title", "format"]] = Field(default=None, description="Sort field")
    sort_order: Optional[SortOrder] = Field(default=None, description="Sort direction")


class ReleaseParams(ToolParameters):
    release_id: int = Field(..., ge=1, description="Discogs release ID")
    curr_abbr: Optional[CurrencyCode] = Field(default=None, description="Currency for marketplace data")


class MasterReleaseParams(ToolParameters):
    master_id: int = Field(..., ge=1, description="Discogs master release ID")


class MasterReleaseVersionsParams(PaginationParams):
    master_id: int = Field(..., ge=1, description="Discogs master release ID")
    format: Optional[str] = Field(default=None, description="Filter by format")
    label: Optional[str] = Field(default=None, description="Filter by label")
    released: Optional[str] = Field(default=None, description="Filter by release year")
    country: Optional[str] = Field(default=None, description="Filter by country")
    sort: Optional[Literal["released", "title", "format", "label", "catno", "country"]] = Field(
        default=None, description="Sort field"
    )
    sort_order: Optional[SortOrder] = Field(default=None, description="Sort direction")


class LabelParams(ToolParameters):
    label_id: int = Field(..., ge=1, description="Discogs label ID")


class LabelReleasesParams(PaginationParams):
    label_id: int = Field(..., ge=1, description="Discogs label ID")


class ReleaseRatingParams(ToolParameters):
    release_id: int = Field(..., ge=1, description="Discogs release ID")
    username: Optional[str] = Field(default=None, description="Discogs username (defaults to the authenticated user)")


class CommunityRatingParams(ToolParameters):
    release_id: int = Field(..., ge=1, description="Discogs release ID")


class InventoryParams(PaginationParams):
    username: Optional[str] = Field(default=None, description="Seller username (defaults to the authenticated user)")
    status: Optional[str] = Field(default=None, description="Listing status filter, e.g. 'For Sale'")
    sort: Optional[Literal["listed", "price", "item", "artist", "label", "catno", "audio", "status", "location"]] = Field(
        default=None, description="Sort field"
    )
    sort_order: Optional[SortOrder] = Field(default=None, description="Sort direction")


class ListingParams(ToolParameters):
    listing_id: int = Field(..., ge=1, description="Marketplace listing ID")
    curr_abbr: Optional[CurrencyCode] = Field(default=None, description="Currency for prices")


class ReleaseStatsParams(ToolParameters):
    release_id: int = Field(..., ge=1, description="Discogs release ID")
    curr_abbr: Optional[CurrencyCode] = Field(default=None, description="Currency for prices")


class EmptyParams(ToolParameters):
    pass


class UsernameParams(ToolParameters):
    username: Optional[str] = Field(default=None, description="Discogs username (defaults to the authenticated user)")


class UserPagedParams(PaginationParams):
    username: Optional[str] = Field(default=None, description="Discogs username (defaults to the authenticated user)")


class CollectionItemsParams(PaginationParams):
    username: Optional[str] = Field(default=None, description="Discogs username (defaults to the authenticated user)")
    folder_id: int = Field(default=0, ge=0, description="Collection folder ID (0 is 'All')")
    sort: Optional[Literal["label", "artist", "title", "catno", "format", "rating", "added", "year"]] = Field(
        default=None, description="Sort field"
    )
    sort_order: Optional[SortOrder] = Field(default=None, description="Sort direction")


class ListParams(ToolParameters):
    list_id: int = Field(..., ge=1, description="Discogs list ID")


class EditReleaseRatingParams(ReleaseRatingParams):
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")


ListingCondition = Literal[
    "Mint (M)",
    "Near Mint (NM or M-)",
    "Very Good Plus (VG+)",
    "Very Good (VG)",
    "Good Plus (G+)",
    "Good (G)",
    "Fair (F)",
    "Poor (P)",
]
SleeveCondition = Literal[
    "Mint (M)",
    "Near Mint (NM or M-)",
    "Very Good Plus (VG+)",
    "Very Good (VG)",
    "Good Plus (G+)",
    "Good (G)",
    "Fair (F)",
    "Poor (P)",
    "Generic",
    "Not Graded",
    "No Cover",
]
OrderStatus = Literal[
    "New Order",
    "Buyer Contacted",
    "Invoice Sent",
    "Payment Pending",
    "Payment Received",
    "In Progress",
    "Shipped",
    "Refund Sent",
    "Cancelled (Non-Paying Buyer)",
    "Cancelled (Item Unavailable)",
    "Cancelled (Per Buyer's Request)",
]


class ListingFields(ToolParameters):
    release_id: int = Field(..., ge=1, description="Release being sold")
    condition: ListingCondition = Field(..., description="Media condition")
    sleeve_condition: Optional[SleeveCondition] = Field(default=None, description="Sleeve condition")
    price: float = Field(..., gt=0, description="Price in the seller's currency")
    comments: Optional[str] = Field(default=None, description="Listing comments")
    allow_offers: Optional[bool] = Field(default=None, description="Accept offers on this listing")
    status: Literal["For Sale", "Draft"] = Field(default="For Sale", description="Listing status")
    external_id: Optional[str] = Field(default=None, description="Private free-text ID")
    location: Optional[str] = Field(default=None, description="Private storage location")
    weight: Optional[float] = Field(default=None, ge=0, description="Weight in grams")
    format_quantity: Optional[int] = Field(default=None, ge=1, description="Number of items counted for shipping")


class UpdateListingParams(ListingFields):
    listing_id: int = Field(..., ge=1, description="Marketplace listing ID")


class DeleteListingParams(ToolParameters):
    listing_id: int = Field(..., ge=1, description="Marketplace listing ID")


class OrderParams(ToolParameters):
    order_id: str = Field(..., min_length=1, description="Marketplace order ID, e.g. '1-1'")


class EditOrderParams(OrderParams):
    status: Optional[OrderStatus] = Field(default=None, description="New order status")
    shipping: Optional[float] = Field(default=None, ge=0, description="Shipping cost")


class OrdersParams(PaginationParams):
    status: Optional[OrderStatus] = Field(default=None, description="Only orders with this status")
    created_after: Optional[str] = Field(default=None, description="ISO 8601 lower bound on creation time")
    created_before: Optional[str] = Field(default=None, description="ISO 8601 upper bound on creation time")
    archived: Optional[bool] = Field(default=None, description="Filter on archived orders")
    sort: Optional[Literal["id", "buyer", "created", "status", "last_activity"]] = Field(
        default=None, description="Sort field"
    )
    sort_order: Optional[SortOrder] = Field(default=None, description="Sort direction")


class OrderMessagesParams(PaginationParams):
    order_id: str = Field(..., min_length=1, description="Marketplace order ID")


class CreateOrderMessageParams(OrderParams):
    message: Optional[str] = Field(default=None, description="Message text")
    status: Optional[OrderStatus] = Field(default=None, description="New order status sent with the message")


class FolderParams(UsernameParams):
    folder_id: int = Field(..., ge=0, description="Collection folder ID")


class CreateFolderParams(UsernameParams):
    name: str = Field(..., min_length=1, description="Folder name")


class EditFolderParams(FolderParams):
    name: str = Field(..., min_length=1, description="New folder name")


class FindReleaseInCollectionParams(PaginationParams):
    username: Optional[str] = Field(default=None, description="Discogs username (defaults to the authenticated user)")
    release_id: int = Field(..., ge=1, description="Discogs release ID")


class AddToFolderParams(UsernameParams):
    folder_id: int = Field(default=1, ge=1, description="Destination folder ID (1 is 'Uncategorized')")
    release_id: int = Field(..., ge=1, description="Discogs release ID")


class CollectionInstanceParams(UsernameParams):
    folder_id: int = Field(..., ge=0, description="Folder currently holding the instance")
    release_id: int = Field(..., ge=1, description="Discogs release ID")
    instance_id: int = Field(..., ge=1, description="Collection instance ID")


class RateInstanceParams(CollectionInstanceParams):
    rating: int = Field(..., ge=0, le=5, description="Rating from 1 to 5 (0 clears it)")


class MoveInstanceParams(CollectionInstanceParams):
    destination_folder_id: int = Field(..., ge=1, description="Folder to move the instance to")


class CustomFieldValueParams(CollectionInstanceParams):
    field_id: int = Field(..., ge=1, description="Custom field ID")
    value: str = Field(..., description="New field value")


class EditProfileParams(UsernameParams):
    name: Optional[str] = Field(default=None, description="Real name")
    home_page: Optional[str] = Field(default=None, description="Website URL")
    location: Optional[str] = Field(default=None, description="Geographic location")
    profile: Optional[str] = Field(default=None, description="Biographical text")
    curr_abbr: Optional[CurrencyCode] = Field(default=None, description="Marketplace currency")


class WantParams(UsernameParams):
    release_id: int = Field(..., ge=1, description="Discogs release ID")


class EditWantParams(WantParams):
    notes: Optional[str] = Field(default=None, description="Notes for the wantlist item")
    rating: Optional[int] = Field(default=None, ge=0, le=5, description="Rating from 0 to 5")


class InventoryExportParams(ToolParameters):
    export_id: int = Field(..., ge=1, description="Inventory export ID")


class ImageParams(ToolParameters):
    url: str = Field(..., min_length=1, description="Discogs image URL (i.discogs.com)")

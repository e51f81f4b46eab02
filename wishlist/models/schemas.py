from pydantic import BaseModel, Field

from wishlist.core.models import Item, Permission, Wishlist


class WishlistCreate(BaseModel):
    id: str | None = None
    name: str = Field(..., min_length=1)


class WishlistUpdate(BaseModel):
    name: str = Field(..., min_length=1)


class WishlistRead(BaseModel):
    id: str
    name: str

    @classmethod
    def from_row(cls, wishlist: Wishlist) -> "WishlistRead":
        return cls(id=wishlist.id, name=wishlist.name)


class UnlockedWishlistRead(WishlistRead):
    """Returned to the owner only: carries the edit password and capability key."""
    password: str
    ownership: str

    @classmethod
    def from_row(cls, wishlist: Wishlist) -> "UnlockedWishlistRead":
        return cls(
            id=wishlist.id,
            name=wishlist.name,
            password=wishlist.password,
            ownership=wishlist.ownership,
        )


class PermissionedWishlistRead(WishlistRead):
    permission: Permission


class ItemCreate(BaseModel):
    url: str = Field(..., min_length=1)


class ItemUpdate(BaseModel):
    url: str | None = None
    name: str | None = None
    description: str | None = None
    image: str | None = None


class ItemRead(BaseModel):
    id: str
    url: str
    name: str
    description: str
    image: str

    @classmethod
    def from_row(cls, item: Item) -> "ItemRead":
        return cls(
            id=item.id,
            url=item.url,
            name=item.name,
            description=item.description,
            image=item.image,
        )


class MetadataRead(BaseModel):
    url: str
    image: str
    title: str
    description: str

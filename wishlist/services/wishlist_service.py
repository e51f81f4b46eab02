import logging
import secrets
import uuid
from typing import List

from wishlist.core.models import Item, Permission, Wishlist, WishlistViewer
from wishlist.exceptions.auth import InvalidPasswordException, MissingCapabilityKeyException
from wishlist.exceptions.wishlist import WishlistExistsException, WishlistNotFoundException
from wishlist.models.schemas import PermissionedWishlistRead
from .repository import DuplicateRowError, RowNotFoundError, RowStoreInterface

logger = logging.getLogger(__name__)


class WishlistService:
    """
    Wishlist bookkeeping and sharing.

    Every caller is identified by a capability key. The key that creates a
    wishlist owns it; other keys gain access by registering a permission:
    ``VIEW`` for anybody who knows the wishlist id, ``EDIT`` for those who
    also know its password.
    """

    def __init__(
        self,
        wishlists: RowStoreInterface[Wishlist],
        viewers: RowStoreInterface[WishlistViewer],
        items: RowStoreInterface[Item],
    ):
        self.wishlists = wishlists
        self.viewers = viewers
        self.items = items

    @staticmethod
    def _require_key(key: str) -> str:
        key = (key or "").strip()
        if not key:
            raise MissingCapabilityKeyException()
        return key

    def create_wishlist(self, key: str, name: str, wishlist_id: str = None) -> Wishlist:
        key = self._require_key(key)
        wishlist = Wishlist(
            id=wishlist_id or str(uuid.uuid4()),
            name=name,
            password=secrets.token_urlsafe(12),
            ownership=key,
        )
        try:
            created = self.wishlists.insert(wishlist)
        except DuplicateRowError:
            raise WishlistExistsException(wishlist.id)
        logger.info(f"Created wishlist {created.id}")
        return created

    def get_wishlist(self, wishlist_id: str) -> Wishlist:
        try:
            return self.wishlists.get(wishlist_id)
        except RowNotFoundError:
            raise WishlistNotFoundException(wishlist_id)

    def update_wishlist(self, wishlist_id: str, name: str) -> Wishlist:
        wishlist = self.get_wishlist(wishlist_id)
        wishlist.name = name
        return self.wishlists.update(wishlist_id, wishlist)

    def get_items(self, wishlist_id: str) -> List[Item]:
        self.get_wishlist(wishlist_id)
        return self.items.list(lambda item: item.wishlist_id == wishlist_id)

    def get_accessible_wishlists(self, key: str) -> List[PermissionedWishlistRead]:
        """Wishlists saved by ``key`` with their permission, then the ones it owns."""
        key = self._require_key(key)
        accessible = []

        for viewer in self.viewers.list(lambda v: v.ownership == key):
            try:
                wishlist = self.wishlists.get(viewer.wishlist_id)
            except RowNotFoundError:
                logger.warning(f"Viewer row {viewer.id} points at a missing wishlist")
                continue
            accessible.append(PermissionedWishlistRead(
                id=wishlist.id, name=wishlist.name, permission=viewer.permission
            ))

        for wishlist in self.wishlists.list(lambda w: w.ownership == key):
            accessible.append(PermissionedWishlistRead(
                id=wishlist.id, name=wishlist.name, permission=Permission.EDIT
            ))
        return accessible

    def register_permission(self, wishlist_id: str, key: str, password: str = "") -> WishlistViewer:
        """
        Save ``wishlist_id`` for ``key``.

        With the right password the key is granted ``EDIT``. Without a password
        a new viewer gets ``VIEW`` and an existing viewer keeps what it had.
        """
        key = self._require_key(key)
        wishlist = self.get_wishlist(wishlist_id)

        if password and not secrets.compare_digest(password.encode(), wishlist.password.encode()):
            raise InvalidPasswordException(wishlist_id)

        viewer_id = WishlistViewer.make_id(wishlist_id, key)
        try:
            viewer = self.viewers.get(viewer_id)
        except RowNotFoundError:
            viewer = WishlistViewer(
                id=viewer_id,
                wishlist_id=wishlist_id,
                ownership=key,
                permission=Permission.EDIT if password else Permission.VIEW,
            )
            logger.info(f"Registered {viewer.permission.value} permission on wishlist {wishlist_id}")
            return self.viewers.insert(viewer)

        if password and viewer.permission != Permission.EDIT:
            viewer.permission = Permission.EDIT
            logger.info(f"Upgraded permission on wishlist {wishlist_id} to EDIT")
            return self.viewers.update(viewer_id, viewer)
        return viewer

"""
Admin Mutation Gateway - the single entry point for back-office writes.

Every mutation asks the injected capability check first. An unauthorized
caller gets AuthorizationError before the payload is parsed or any store
is touched.
"""

from typing import Any, Optional

from sabi.models.base import parse_input
from sabi.models.blog_post import BlogPost, CreateBlogPostInput, UpdateBlogPostInput
from sabi.models.inquiry import Inquiry
from sabi.models.listing import CreateListingInput, Listing, UpdateListingInput
from sabi.models.site_settings import SiteSettings, SiteSettingsUpdate
from sabi.models.team_member import CreateTeamMemberInput, TeamMember, UpdateTeamMemberInput
from sabi.services import blog_posts, inquiry_intake, listings, site_settings, team
from sabi.services.admin_auth import Authorizer
from sabi.services.districts import ABUJA_DISTRICTS, DistrictDirectory
from sabi.services.store import CollectionStore
from sabi.utils.errors import AuthorizationError
from sabi.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


class AdminMutationGateway:
    """Authorizes, validates and delegates admin mutations to the entity services."""

    def __init__(
        self,
        is_authorized: Authorizer,
        listings_store: Optional[CollectionStore] = None,
        blogs_store: Optional[CollectionStore] = None,
        team_store: Optional[CollectionStore] = None,
        inquiries_store: Optional[CollectionStore] = None,
        settings_store: Optional[CollectionStore] = None,
        districts: DistrictDirectory = ABUJA_DISTRICTS,
    ):
        self.is_authorized = is_authorized
        self.listings_store = listings_store
        self.blogs_store = blogs_store
        self.team_store = team_store
        self.inquiries_store = inquiries_store
        self.settings_store = settings_store
        self.districts = districts

    def _require_admin(self, context: Any, action: str, entity: str) -> None:
        if not self.is_authorized(context):
            logger.warning("Unauthorized admin mutation", action=action, entity=entity)
            raise AuthorizationError(f"Not authorized to {action} {entity}")

    def require_admin(self, context: Any) -> None:
        """Gate for admin-only reads (inquiry list, drafts, inactive members)."""
        self._require_admin(context, "read", "admin data")

    # Listings

    async def create_listing(self, context: Any, payload: Any) -> Listing:
        self._require_admin(context, "create", "property")
        data = parse_input(CreateListingInput, payload)
        return await listings.create_listing(self.listings_store, data, self.districts)

    async def update_listing(self, context: Any, listing_id: str, payload: Any) -> Listing:
        self._require_admin(context, "update", "property")
        data = parse_input(UpdateListingInput, payload)
        return await listings.update_listing(self.listings_store, listing_id, data)

    async def delete_listing(self, context: Any, listing_id: str) -> None:
        self._require_admin(context, "delete", "property")
        await listings.delete_listing(self.listings_store, listing_id)

    # Blog posts

    async def create_post(self, context: Any, payload: Any) -> BlogPost:
        self._require_admin(context, "create", "blog")
        data = parse_input(CreateBlogPostInput, payload)
        return await blog_posts.create_post(self.blogs_store, data)

    async def update_post(self, context: Any, post_id: str, payload: Any) -> BlogPost:
        self._require_admin(context, "update", "blog")
        data = parse_input(UpdateBlogPostInput, payload)
        return await blog_posts.update_post(self.blogs_store, post_id, data)

    async def delete_post(self, context: Any, post_id: str) -> None:
        self._require_admin(context, "delete", "blog")
        await blog_posts.delete_post(self.blogs_store, post_id)

    # Team

    async def create_member(self, context: Any, payload: Any) -> TeamMember:
        self._require_admin(context, "create", "team member")
        data = parse_input(CreateTeamMemberInput, payload)
        return await team.create_member(self.team_store, data)

    async def update_member(self, context: Any, member_id: str, payload: Any) -> TeamMember:
        self._require_admin(context, "update", "team member")
        data = parse_input(UpdateTeamMemberInput, payload)
        return await team.update_member(self.team_store, member_id, data)

    async def delete_member(self, context: Any, member_id: str) -> TeamMember:
        self._require_admin(context, "delete", "team member")
        return await team.deactivate_member(self.team_store, member_id)

    # Inquiries and settings

    async def update_inquiry_status(self, context: Any, inquiry_id: str, payload: Any) -> Inquiry:
        self._require_admin(context, "update", "inquiry")
        return await inquiry_intake.update_inquiry_status(self.inquiries_store, inquiry_id, payload)

    async def update_settings(self, context: Any, payload: Any) -> SiteSettings:
        self._require_admin(context, "update", "settings")
        data = parse_input(SiteSettingsUpdate, payload)
        return await site_settings.update_site_settings(self.settings_store, data)

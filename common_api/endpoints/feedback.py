from typing import List, Union

from ..lib.checks import check_argument_type, check_criteria_argument, check_id_argument_type
from ..lib.decorators import log_call
from ..lib.impl import add_impl, get_impl, list_impl
from ..lib.impl.request import perform
from ..lib.utils import serialize_value, stringify_id, substitute
from ..models.feedback import Feedback, FeedbackAction, FeedbackTrack
from .base import Endpoint


class FeedbackApi(Endpoint):
    """API обратной связи пользователей.

    Допустимые критерии фильтрации совпадают с полями модели Feedback.
    """

    RESOURCE = "/feedback"
    entity_class = Feedback

    @log_call
    def list(
        self,
        page_request=None,
        criteria=None,
        sort_request=None,
        transform_urls=True,
        show_loading=True,
    ):
        check_criteria_argument({} if criteria is None else criteria, Feedback)
        return list_impl(
            self,
            self.url(),
            page_request,
            criteria,
            sort_request,
            show_loading,
            {"transform_urls": transform_urls},
        )

    @log_call
    def get(self, id, transform_urls=True, show_loading=True):
        return get_impl(
            self, self.url("/{id}"), id, show_loading, {"transform_urls": transform_urls}
        )

    @log_call
    async def get_tracks(self, id, transform_urls=True, show_loading=True) -> List[FeedbackTrack]:
        """Получение истории обработки обращения"""
        check_id_argument_type(id)
        check_argument_type("transform_urls", transform_urls, bool)
        check_argument_type("show_loading", show_loading, bool)
        obj = await perform(
            self,
            "get",
            substitute(self.url("/{id}/track"), id=stringify_id(id)),
            "show_getting" if show_loading else None,
            params={"transform_urls": str(transform_urls).lower()},
        )
        tracks = FeedbackTrack.create_array(obj)
        self.logger.info("Successfully get %d tracks of the Feedback %s.", len(tracks), id)
        return tracks

    @log_call
    def add(self, feedback, show_loading=True):
        return add_impl(self, self.url(), feedback, show_loading)

    @log_call
    async def perform_action(
        self,
        id,
        action: Union[FeedbackAction, str],
        track: FeedbackTrack,
        show_loading=True,
    ) -> FeedbackTrack:
        """Выполнение действия над обращением с записью в его историю"""
        check_id_argument_type(id)
        check_argument_type("action", action, (FeedbackAction, str))
        check_argument_type("track", track, FeedbackTrack)
        check_argument_type("show_loading", show_loading, bool)
        action = serialize_value(action)
        url = substitute(self.url("/{id}/action/{action}"), id=stringify_id(id), action=action)
        obj = await perform(
            self,
            "put",
            url,
            "show_updating" if show_loading else None,
            data=serialize_value(track),
        )
        result = FeedbackTrack.create(obj)
        self.logger.info("Successfully perform the action %s to the Feedback: %s", action, id)
        self.logger.debug("The added FeedbackTrack is: %s", result)
        return result

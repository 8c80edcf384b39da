"""
Server providers

Lazy singletons of every data provider
"""
from mindtrack.utils import LazySingleton

from .activity_type_provider import ActivityTypeProvider, visible_to_user
from .activity_record_provider import ActivityRecordProvider
from .self_test_provider import SelfTestProvider

activity_type_provider = LazySingleton(ActivityTypeProvider)
activity_record_provider = LazySingleton(ActivityRecordProvider)
self_test_provider = LazySingleton(SelfTestProvider)

__all__ = [
    "ActivityTypeProvider",
    "ActivityRecordProvider",
    "SelfTestProvider",
    "visible_to_user",
    "activity_type_provider",
    "activity_record_provider",
    "self_test_provider",
]

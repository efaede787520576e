from simple_singleton import Singleton

from .common import AiohttpClient
from .endpoints.app import AppApi
from .endpoints.category import CategoryApi
from .endpoints.current_user import CurrentUserApi
from .endpoints.department import DepartmentApi
from .endpoints.device_init import DeviceInitApi
from .endpoints.dict_entry import DictEntryApi
from .endpoints.dictionary import DictApi
from .endpoints.employee import EmployeeApi
from .endpoints.feedback import FeedbackApi
from .endpoints.file import FileApi
from .endpoints.organization import OrganizationApi
from .endpoints.person import PersonApi
from .endpoints.region import CityApi, CountryApi, DistrictApi, ProvinceApi, StreetApi
from .endpoints.setting import SettingApi
from .endpoints.system import SystemApi
from .endpoints.task import TaskApi
from .endpoints.upload import UploadApi
from .endpoints.user import UserApi
from .endpoints.user_authenticate import UserAuthenticateApi
from .endpoints.verify_code import VerifyCodeApi
from .endpoints.wechat import WechatApi


class ApiClient(AiohttpClient, metaclass=Singleton):
    def __init__(self) -> None:
        super().__init__()
        self.app = AppApi(self)
        self.organization = OrganizationApi(self)
        self.department = DepartmentApi(self)
        self.employee = EmployeeApi(self)
        self.country = CountryApi(self)
        self.province = ProvinceApi(self)
        self.city = CityApi(self)
        self.district = DistrictApi(self)
        self.street = StreetApi(self)
        self.category = CategoryApi(self)
        self.dict = DictApi(self)
        self.dict_entry = DictEntryApi(self)
        self.person = PersonApi(self)
        self.user = UserApi(self)
        self.setting = SettingApi(self)
        self.feedback = FeedbackApi(self)
        self.task = TaskApi(self)
        self.upload = UploadApi(self)
        self.file = FileApi(self)
        self.wechat = WechatApi(self)
        self.current_user = CurrentUserApi(self)
        self.user_authenticate = UserAuthenticateApi(self)
        self.device_init = DeviceInitApi(self)
        self.system = SystemApi(self)
        self.verify_code = VerifyCodeApi(self)

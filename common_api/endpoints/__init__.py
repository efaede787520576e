from .app import AppApi
from .base import Endpoint
from .category import CategoryApi
from .current_user import CurrentUserApi
from .department import DepartmentApi
from .device_init import DeviceInitApi
from .dict_entry import DictEntryApi
from .dictionary import DictApi
from .employee import EmployeeApi
from .feedback import FeedbackApi
from .file import FileApi
from .organization import OrganizationApi
from .person import PersonApi
from .region import CityApi, CountryApi, DistrictApi, ProvinceApi, RegionApi, StreetApi
from .setting import SettingApi
from .system import SystemApi
from .task import TaskApi
from .upload import UploadApi
from .user import UserApi
from .user_authenticate import UserAuthenticateApi
from .verify_code import VerifyCodeApi
from .wechat import WechatApi

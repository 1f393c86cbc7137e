from django.urls import re_path
from user.views import (
    AuthCheckView,
    ChangePasswordView,
    UserLoginView,
    UserRegistrationView,
)

# 끝 슬래시는 있어도 없어도 됩니다
urlpatterns = [
    re_path(r"^login/?$", UserLoginView.as_view(), name="login"),
    re_path(r"^register/?$", UserRegistrationView.as_view(), name="register"),
    re_path(r"^check/?$", AuthCheckView.as_view(), name="auth_check"),
    re_path(
        r"^change-password/?$", ChangePasswordView.as_view(), name="change_password"
    ),
]

# coding: utf8
from flask import request
from flask_restx import Namespace, Resource

from storefront.decorators import admin_required
from storefront.lib.logger import log as logger
from storefront.lib.response import Response
from storefront.services.setting import SettingService

ns = Namespace(name="setting", description="Setting API")


@ns.route("/general")
class GeneralSetting(Resource):
    def get(self):
        return Response(data=SettingService.get_general_settings()).to_dict()


@ns.route("/all")
class AllSetting(Resource):
    @admin_required
    def get(self):
        return Response(data=SettingService.get_settings()).to_dict()


@ns.route("/update_setting")
class APIUpdateSetting(Resource):
    @admin_required
    def post(self):
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return Response(
                ok=False, error="Settings must be a non-empty object", status=400
            ).to_dict()

        try:
            settings = SettingService.update_settings(data)
        except Exception as e:
            logger.error(f"Update setting failed: {e}")
            return Response(ok=False, error="Update setting failed", status=500).to_dict()

        return Response(data=settings, message="Settings updated").to_dict()

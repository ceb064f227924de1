# coding: utf8
from flask import request
from flask_restx import Namespace, Resource

from storefront.lib.logger import log as logger
from storefront.lib.response import Response
from storefront.services.contact import ContactService

ns = Namespace(name="contact", path="/", description="Contact form API")


@ns.route("/contact")
class APIContact(Resource):
    def post(self):
        form, errors = ContactService.validate(request.get_json(silent=True))
        if errors:
            return Response(
                ok=False, error="Validation failed", errors=errors, status=400
            ).to_dict()

        try:
            result = ContactService.send_contact_message(form)
        except Exception as e:
            logger.error(f"[CONTACT] Error: {e}")
            result = "failed"

        if result == "not_configured":
            return Response(
                ok=False,
                error="Email service not configured. Please contact support directly.",
                status=500,
            ).to_dict()
        if result != "sent":
            return Response(
                ok=False,
                error="Failed to send message. Please try again later.",
                status=500,
            ).to_dict()

        return Response(
            message="Thank you for contacting us! We will get back to you soon."
        ).to_dict()

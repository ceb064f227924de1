from storefront.models.customer import Customer


class CustomerService:

    @staticmethod
    def find_customer_by_email(email):
        if not email:
            return None
        return Customer.query.filter(Customer.email == email).first()

import pytest

from conftest import COLOR, SIZE, category_payload

BRANDS = {"brands": [{"id": 3, "name": "Acme", "status": 1}]}


@pytest.fixture
def multi_category(fake_api):
    fake_api.add("GET", "/api/get-category-for-product/5", {"res": "success", "result": category_payload([COLOR, SIZE])})
    fake_api.add("GET", "/api/brands", BRANDS)
    fake_api.add("GET", "/api/images/get-files/products", {"files": ["products/red.jpg", "products/blue.jpg"]})
    return fake_api


@pytest.fixture
def plain_category(fake_api):
    fake_api.add("GET", "/api/get-category-for-product/5", {"res": "success", "result": category_payload()})
    fake_api.add("GET", "/api/brands", BRANDS)
    return fake_api


def multi_post(with_images=True):
    data = {"name": "Tee", "brand_id": "3", "item_code": "TEE", "status": "1", "action": "save"}
    for vi, (title, value) in enumerate([("Red", 11), ("Blue", 12)]):
        prefix = f"variants[{vi}]"
        data[f"{prefix}[title]"] = title
        data[f"{prefix}[attribute_value]"] = str(value)
        if with_images:
            data[f"{prefix}[image_url]"] = f"products/{title.lower()}.jpg"
        for oi, (size, size_id) in enumerate([("S", 21), ("M", 22), ("L", 23)]):
            oprefix = f"{prefix}[options][{oi}]"
            data.update(
                {
                    f"{oprefix}[title]": size,
                    f"{oprefix}[attribute_value]": str(size_id),
                    f"{oprefix}[sku]": f"{title[0]}-{size}",
                    f"{oprefix}[mrp]": "30",
                    f"{oprefix}[bp]": "12",
                    f"{oprefix}[sp]": "25",
                    f"{oprefix}[stock]": "4",
                }
            )
    return data


def test_new_multi_form(admin_client, multi_category):
    resp = admin_client.get("/admin/categories/5/products/new")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "New product in T-shirts" in html
    assert "Add option" in html
    assert 'name="variants[0][options][0][sku]"' in html
    assert '<option value="11" >Red</option>' in html
    assert 'list="image-choices"' in html
    assert '<option value="products/red.jpg">' in html


def test_new_form_without_image_listing(admin_client, multi_category):
    multi_category.add("GET", "/api/images/get-files/products", {"message": "Server Error"}, status=500)
    assert admin_client.get("/admin/categories/5/products/new").status_code == 200


def test_add_variant_row(admin_client, multi_category):
    resp = admin_client.post("/admin/categories/5/products/new", data={**multi_post(), "action": "add:variants"})
    html = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Variant 3" in html
    assert 'name="variants[2][options][0][sku]"' in html
    assert 'value="R-S"' in html
    assert not multi_category.find("POST", "/api/create-product")


def test_add_option_row(admin_client, multi_category):
    data = multi_post()
    data["action"] = "add:options:1"
    html = admin_client.post("/admin/categories/5/products/new", data=data).get_data(as_text=True)
    assert 'name="variants[1][options][3][sku]"' in html
    assert 'name="variants[0][options][3][sku]"' not in html


def test_variant_image_required_when_first_attribute_has_images(admin_client, multi_category):
    resp = admin_client.post("/admin/categories/5/products/new", data=multi_post(with_images=False))
    assert resp.status_code == 200
    assert "Primary image is required" in resp.get_data(as_text=True)
    assert not multi_category.find("POST", "/api/create-product")


def test_price_validation_messages(admin_client, multi_category):
    data = multi_post()
    data["variants[0][options][0][mrp]"] = "0"
    data["variants[0][options][1][stock]"] = "-1"
    data["variants[0][options][2][sku]"] = "SKU-TOO-LONG"
    html = admin_client.post("/admin/categories/5/products/new", data=data).get_data(as_text=True)
    assert "MRP must be greater than 0" in html
    assert "Stock must be greater than or equal to 0" in html
    assert "Maximum length for SKU is 10 characters" in html


def test_create_multi_product(admin_client, multi_category):
    multi_category.add("POST", "/api/create-product", {"res": "success", "message": "Product created successfully!"})
    resp = admin_client.post("/admin/categories/5/products/new", data=multi_post())
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/admin/categories/5/products")

    sent = multi_category.last("POST", "/api/create-product").json
    assert sent["category_id"] == 5
    assert sent["brandId"] == 3
    assert len(sent["variants"]) == 6
    assert sent["variants"][0]["title"] == "Red S"
    assert sent["variants"][0]["attributeValues"] == [11, 21]
    assert sent["variants"][5]["image_url"] == "products/blue.jpg"
    assert all("id" not in v for v in sent["variants"])


def test_create_backend_validation_is_shown(admin_client, multi_category):
    multi_category.add(
        "POST",
        "/api/create-product",
        {"res": "error", "errors": {"variants.0.sku": ["The SKU R-S has already been taken."]}},
        status=422,
    )
    resp = admin_client.post("/admin/categories/5/products/new", data=multi_post())
    assert resp.status_code == 200
    assert "The SKU R-S has already been taken." in resp.get_data(as_text=True)


def test_unknown_category(admin_client, fake_api):
    assert admin_client.get("/admin/categories/99/products/new").status_code == 404


def test_edit_single_variant_form_is_prefilled(admin_client, plain_category):
    plain_category.add(
        "GET",
        "/api/admin-product-details/4",
        {
            "res": "success",
            "product": {
                "id": 4,
                "name": "Plain tee",
                "category_id": 5,
                "brand_id": 3,
                "image_url": "products/plain.jpg",
                "variants": [{"id": 70, "sku": "PT-1", "mrp": "20.00", "sp": "15.50", "bp": "8.00", "stock": 3}],
            },
        },
    )
    html = admin_client.get("/admin/categories/5/products/4/edit").get_data(as_text=True)
    assert "Edit product in T-shirts" in html
    assert 'value="Plain tee"' in html
    assert 'name="variant_id" value="70"' in html
    assert 'value="PT-1"' in html
    assert 'value="15.50"' in html


def test_update_single_variant_product(admin_client, plain_category):
    plain_category.add("GET", "/api/admin-product-details/4", {"product": {"id": 4, "name": "Plain tee", "category_id": 5}})
    plain_category.add("PUT", "/api/update-product/4", {"res": "success", "message": "Product updated successfully!"})
    resp = admin_client.post(
        "/admin/categories/5/products/4/edit",
        data={
            "name": "Plain tee",
            "brand_id": "3",
            "image_url": "products/plain.jpg",
            "variant_id": "70",
            "sku": "PT-1",
            "mrp": "20",
            "bp": "8",
            "sp": "16",
            "stock": "3",
            "action": "save",
        },
    )
    assert resp.status_code == 302
    sent = plain_category.last("PUT", "/api/update-product/4").json
    assert sent["variants"] == [{"sku": "PT-1", "mrp": "20", "sp": "16", "bp": "8", "stock": 3, "id": 70}]
    assert sent["image_url"] == "products/plain.jpg"


def test_single_variant_product_needs_an_image(admin_client, plain_category):
    resp = admin_client.post(
        "/admin/categories/5/products/new",
        data={"name": "Plain tee", "brand_id": "3", "sku": "PT-1", "mrp": "20", "bp": "8", "sp": "16", "stock": "3"},
    )
    assert "Primary image is required" in resp.get_data(as_text=True)


# --- listing / detail ------------------------------------------------------------

def admin_products(page, last_page, total):
    return {
        "res": "success",
        "data": {
            "products": [
                {"id": 9, "name": "Tee", "category_id": 5, "min_price": "19.99", "max_price": "19.99", "total_stock": 12, "variants_count": 6}
            ],
            "pagination": {"current_page": page, "last_page": last_page, "per_page": 20, "total": total},
        },
    }


def test_list_first_page_disables_previous(admin_client, fake_api):
    fake_api.add("GET", "/api/admin-products", admin_products(1, 2, 25))
    html = admin_client.get("/admin/products?search=tee").get_data(as_text=True)
    assert '<span class="page-link" aria-disabled="true">Previous</span>' in html
    assert "/admin/products?page=2&amp;search=tee" in html
    assert fake_api.last("GET", "/api/admin-products").params == {"page": 1, "per_page": 20, "search": "tee"}


def test_list_last_page_disables_next(admin_client, fake_api):
    fake_api.add("GET", "/api/admin-products", admin_products(2, 2, 25))
    html = admin_client.get("/admin/products?page=2").get_data(as_text=True)
    assert '<span class="page-link" aria-disabled="true">Next</span>' in html
    assert "/admin/products?page=1" in html


def test_next_page_makes_one_request(admin_client, fake_api):
    fake_api.add("GET", "/api/admin-products", admin_products(1, 2, 25))
    admin_client.get("/admin/products")
    fake_api.add("GET", "/api/admin-products", admin_products(2, 2, 25))
    fake_api.calls.clear()

    html = admin_client.get("/admin/products?page=2").get_data(as_text=True)
    calls = fake_api.find("GET", "/api/admin-products")
    assert len(calls) == 1
    assert calls[0].params == {"page": 2, "per_page": 20}
    assert '<span class="page-link" aria-disabled="true">Next</span>' in html


def test_list_delete_confirmation(admin_client, fake_api):
    fake_api.add("GET", "/api/admin-products", admin_products(1, 1, 1))
    html = admin_client.get("/admin/products?delete=9").get_data(as_text=True)
    assert 'action="/admin/products/9/delete"' in html


def test_delete_product_returns_to_category(admin_client, fake_api):
    fake_api.add("DELETE", "/api/delete-product/9", {"res": "success"})
    resp = admin_client.post("/admin/products/9/delete", data={"category_id": "5"})
    assert resp.headers["Location"].endswith("/admin/categories/5/products")


def product_details():
    return {
        "product": {
            "id": 9,
            "name": "Tee",
            "category_id": 5,
            "category": {"id": 5, "name": "T-shirts"},
            "brand": {"id": 3, "name": "Acme"},
            "feature_json": '["Breathable"]',
            "variants": [
                {"id": 1, "title": "Red S", "sku": "R-S", "mrp": "30", "sp": "25", "bp": "12", "stock": 4},
                {"id": 2, "title": "Red M", "sku": "R-M", "mrp": "30", "sp": "25", "bp": "12", "stock": 0},
            ],
        }
    }


def test_product_detail(admin_client, fake_api):
    fake_api.add("GET", "/api/admin-product-details/9", product_details())
    html = admin_client.get("/admin/products/9").get_data(as_text=True)
    assert "Red S" in html and "R-M" in html
    assert "Breathable" in html
    assert "/admin/products/9?delete_variant=2" in html


def test_delete_variant_confirmation_and_post(admin_client, fake_api):
    fake_api.add("GET", "/api/admin-product-details/9", product_details())
    html = admin_client.get("/admin/products/9?delete_variant=2").get_data(as_text=True)
    assert 'action="/admin/products/9/variants/2/delete"' in html

    fake_api.add("DELETE", "/api/delete-variant/2", {"res": "success", "message": "Variant deleted successfully!"})
    resp = admin_client.post("/admin/products/9/variants/2/delete", follow_redirects=True)
    assert "Variant deleted successfully!" in resp.get_data(as_text=True)


def test_product_detail_not_found(admin_client, fake_api):
    assert admin_client.get("/admin/products/404").status_code == 404

import json
from flask import Flask
from sitehost.models import Operation, PathItem, Schema
from sitehost.options import SwaggerOptions
from sitehost.swagger import build_document, paths_from_app, serialize_document, write_document


def _app():
    app = Flask(__name__)

    @app.get('/api/products')
    def list_products():
        """List products.

        Supports pagination.
        """
        return []

    @app.route('/api/products/<int:product_id>', methods=['GET', 'PUT'])
    def product(product_id):
        return {}

    @app.get('/api/files/<path:name>/<uuid:rev>/<float:ratio>')
    def file_revision(name, rev, ratio):
        return {}

    @app.get('/internal/metrics')
    def metrics():
        return {}

    return app


def test_paths_reflect_rules_under_base_path():
    paths = paths_from_app(_app(), '/api')
    assert sorted(paths) == ['/files/{name}/{rev}/{ratio}', '/products', '/products/{product_id}']


def test_single_method_operation():
    op = paths_from_app(_app(), '/api')['/products'].get
    assert op.operation_id == 'list_products'
    assert op.summary == 'List products.'
    assert op.tags == ['Products']
    assert op.parameters is None
    assert op.responses['200'].description == 'OK'


def test_multi_method_operations_and_path_params():
    item = paths_from_app(_app(), '/api')['/products/{product_id}']
    assert set(item.operations()) == {'get', 'put'}
    assert item.get.operation_id == 'product_get'
    assert item.put.operation_id == 'product_put'
    assert item.head is None and item.options is None
    param = item.get.parameters[0]
    assert param.to_dict() == {'name': 'product_id', 'in': 'path', 'required': True, 'type': 'integer'}


def test_converter_types():
    op = paths_from_app(_app(), '/api')['/files/{name}/{rev}/{ratio}'].get
    params = {p.name: p.partial for p in op.parameters}
    assert params['name'].type == 'string'
    assert (params['rev'].type, params['rev'].format) == ('string', 'uuid')
    assert (params['ratio'].type, params['ratio'].format) == ('number', 'float')


def test_empty_base_path_keeps_everything_but_excluded():
    paths = paths_from_app(_app(), '/', exclude=['metrics'])
    assert '/api/products' in paths
    assert '/internal/metrics' not in paths
    assert not any(p.startswith('/static') for p in paths)


def test_build_document_metadata_and_tags():
    options = SwaggerOptions('Shop', 'Shop API', '/api', version='2.1.0')
    paths = paths_from_app(_app(), '/api')
    doc = build_document(options, paths=paths, host='shop.example.com', schemes=['https'])
    out = doc.to_dict()
    assert out['swagger'] == '2.0'
    assert out['info'] == {'title': 'Shop', 'description': 'Shop API', 'version': '2.1.0'}
    assert out['host'] == 'shop.example.com'
    assert out['basePath'] == '/api'
    assert out['schemes'] == ['https']
    assert out['tags'] == [{'name': 'Files'}, {'name': 'Products'}]
    assert 'definitions' not in out


def test_document_info_is_a_copy():
    options = SwaggerOptions('Shop', 'Shop API', '/api')
    doc = build_document(options)
    doc.info.title = 'Changed'
    doc.info.vendor_extensions['x-changed'] = True
    assert options.info.title == 'Shop'
    assert options.info.vendor_extensions == {}


def test_force_schemas_added_once():
    options = SwaggerOptions('Shop', '', '/api', force_schemas=['Product', 'Vendor'])
    given = {'Product': Schema(type='object', required=['id'])}
    doc = build_document(options, definitions=given)
    assert doc.definitions['Product'] == Schema(type='object', required=['id'])
    assert doc.definitions['Vendor'] == Schema(type='object', title='Vendor')


def test_xml_documentation_fills_missing_summaries(tmp_path):
    xml_path = tmp_path / 'api.xml'
    xml_path.write_text(
        '<?xml version="1.0"?>'
        '<doc><members>'
        '<member name="T:Shop.Models.Product"><summary>A sellable product.</summary></member>'
        '<member name="M:Shop.Api.ListProducts(System.Int32)"><summary>\n  Lists all\n  products.\n</summary></member>'
        '<member name="M:Shop.Api.GetProduct"><summary>Ignored.</summary></member>'
        '</members></doc>'
    )
    options = SwaggerOptions('Shop', '', '/api', xml_document_path=str(xml_path), force_schemas=['Product'])
    paths = {
        '/products': PathItem(get=Operation(operation_id='ListProducts')),
        '/products/{id}': PathItem(get=Operation(operation_id='GetProduct', summary='Kept')),
    }
    doc = build_document(options, paths=paths)
    assert doc.definitions['Product'].description == 'A sellable product.'
    assert doc.paths['/products'].get.summary == 'Lists all products.'
    assert doc.paths['/products/{id}'].get.summary == 'Kept'
    # caller's objects are left alone
    assert paths['/products'].get.summary is None


def test_serialize_is_deterministic():
    options = SwaggerOptions('Shop', '', '/api')
    first = serialize_document(build_document(options, paths=paths_from_app(_app(), '/api')))
    second = serialize_document(build_document(options, paths=paths_from_app(_app(), '/api')))
    assert first == second
    assert first.endswith('\n')
    assert json.loads(first)['paths']['/products']['get']['operationId'] == 'list_products'


def test_write_document(tmp_path):
    options = SwaggerOptions('Shop', '', '/api', json_name='shop.json')
    doc = build_document(options)
    out = write_document(doc, tmp_path / 'nested' / 'out', options.json_name)
    assert out == tmp_path / 'nested' / 'out' / 'shop.json'
    assert json.loads(out.read_text()) == doc.to_dict()

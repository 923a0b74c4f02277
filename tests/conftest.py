from pytest import Item, fixture

from clacky.storage import InMemoryStorage, OnDiskStorage


@fixture(params=['memory', 'disk'])
def storage(request, tmp_path):
    '''
    Each register store backend, fresh and empty.
    '''
    if request.param == 'memory':
        return InMemoryStorage()
    return OnDiskStorage(tmp_path / 'registers')


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))

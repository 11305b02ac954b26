import ast
import os
import subprocess


def parse_version(path):
    with open(path) as fp:
        return _AssignmentParser().parse(fp.read())["version"]


def write_version_py(filename, major, minor, micro, is_released):
    template = """\
# THIS FILE IS GENERATED FROM SETUP_UTILS
version = '{final_version}'
full_version = '{full_version}'
git_revision = '{git_revision}'
is_released = {is_released}

version_info = {version_info}
"""
    version = "{0}.{1}.{2}".format(major, minor, micro)

    if not os.path.exists('.git') and os.path.exists(filename):
        return

    git_rev = _git_version()
    build_number = _build_number()

    if is_released:
        release_level = "final"
        final_version = full_version = version
    else:
        release_level = "dev"
        full_version = "{0}.dev{1}".format(version, build_number)
        final_version = full_version

    version_info = (major, minor, micro, release_level, build_number)

    with open(filename, "wt") as fp:
        data = template.format(
            final_version=final_version, full_version=full_version,
            git_revision=git_rev, is_released=is_released,
            version_info=version_info,
        )
        fp.write(data)


def _git_version():
    """ Return git revision or "Unknown" if cannot be computed
    """
    try:
        out = _minimal_ext_cmd(['git', 'rev-parse', 'HEAD'])
        git_revision = out.strip().decode('ascii')
    except (OSError, subprocess.CalledProcessError):
        git_revision = "Unknown"

    return git_revision


def _build_number():
    try:
        out = _minimal_ext_cmd(['git', 'rev-list', '--count', 'HEAD'])
        return int(out.strip().decode('ascii'))
    except (OSError, subprocess.CalledProcessError):
        return 0


def _minimal_ext_cmd(cmd):
    # construct minimal environment
    env = {}
    for k in ['SYSTEMROOT', 'PATH']:
        v = os.environ.get(k)
        if v is not None:
            env[k] = v
    # LANGUAGE is used on win32
    env['LANGUAGE'] = 'C'
    env['LANG'] = 'C'
    env['LC_ALL'] = 'C'
    return subprocess.check_output(cmd, env=env, stderr=subprocess.DEVNULL)


class _AssignmentParser(ast.NodeVisitor):
    def __init__(self):
        self._data = {}

    def parse(self, s):
        self._data.clear()

        root = ast.parse(s)
        self.visit(root)
        return self._data

    def generic_visit(self, node):
        if type(node) != ast.Module:
            raise ValueError(
                "Unexpected expression @ line {0}".format(node.lineno),
                node.lineno
            )
        super(_AssignmentParser, self).generic_visit(node)

    def visit_Assign(self, node):
        value = ast.literal_eval(node.value)
        for target in node.targets:
            self._data[target.id] = value

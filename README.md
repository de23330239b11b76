# ppcnn

Shared pieces for a client/server system that runs convolutional neural
network inference on encrypted images. The package is pure Python and has
no runtime dependencies.

## Modules

- `ppcnn.config`: `Config` reads configuration files. Each line holds a
  key and a value separated by spaces, tabs, `,` or `=`. Text after `#`
  is ignored, and if a key appears twice the first value is kept.
  `Config.get_value(key)` returns the raw string and
  `Config.is_exist_key(key)` tells whether a key is present.
  `config_get_value(config, key, kind)` returns the value converted to
  `str`, `int` or `float`. Numbers are read from the leading part of the
  value. A missing key raises `ppcnn.utility.FileError`.
- `ppcnn.params`: the parameter records sent between client and server,
  in a whitespace-separated text form. The records are
  `ComputationParams`, `C2SEnckeyParam`, `C2SQueryParam`,
  `C2SResreqParam` and `Srv2CliParam`, with the `ServerCalcResult`
  enumeration. Every record has `dumps()` and a `loads(text)`
  classmethod, and `ComputationParams.to_string()` gives a one-line
  summary. Fields are checked when a record is built: sizes must not be
  negative, identifiers must fit in 32 bits, and dataset and model names
  must be single words.
- `ppcnn.data`: `BasicData` is an abstract list of items. It has
  `push`, `clear`, `data()` (the first item), `vdata()` (all items),
  `save_to_file`, `load_from_file` and `stream_size`. `data()` and
  `vdata()` raise `EmptyDataError` when the container is empty.
  `PlainData(fmt="q")` stores fixed-size values as a native 64-bit count
  followed by the raw values, using a `struct` format code. Saving an
  empty `PlainData` writes nothing.
- `ppcnn.mapqueue`: `ConcurrentMapQueue` is a lock-guarded map.
  - `push(key, value)` refuses duplicate keys with `ValueError`.
  - `popitem()` removes and returns the entry with the smallest key.
  - `pop(key)` removes and returns the value for a key.
  - `get(key)` returns the value, or `None` when the key is absent.
  - The queue also supports `count`, `len`, `in` and iteration in key
    order.
- `ppcnn.mnist`: readers for MNIST IDX files. These are
  `read_mnist_image_file`, `read_mnist_label_file`,
  `read_mnist_label_file_categorical`, `read_training_images`,
  `read_test_images`, `read_training_labels`, `read_test_labels` and
  `read_dataset(folder="mnist", ...)`, which returns an `MnistDataset`.
  A missing file raises `FileError`. A wrong magic number or a truncated
  file raises `ValueError`.
- `ppcnn.cifar`: readers for the CIFAR-10 binary batches. These are
  `read_cifar10_file`, `read_cifar10_file_categorical`, `read_training`,
  `read_test`, `read_training_categorical`, `read_test_categorical` and
  `read_dataset`, which returns a `Cifar10Dataset`. The default folder is
  `cifar-10/cifar-10-batches-bin`.
- `ppcnn.datasets`: `load_mnist_test_images`, `load_mnist_test_labels`,
  `load_cifar10_test_images` and `load_cifar10_test_labels`. Images come
  back as lists of floats scaled into `[0, 1]` by `normalize`.
- `ppcnn.preprocess`: `binarize_each`, `normalize_each`,
  `binarize_dataset` and `normalize_dataset` change image collections in
  place. `mean` and `stddev` are also provided. `normalize_each` raises
  `ZeroDivisionError` for an image whose pixels are all equal.
- `ppcnn.constants`: the `ControlCode`, `OptLevel`, `Activation` and
  `LayerClass` enumerations, together with protocol defaults and the
  Swish and Mish approximation coefficients. `epsilon_for(bits, bits)`
  looks up the encoding epsilon.
- `ppcnn.optoption`: `OptOption(opt_level, activation, slot_count)`
  sets the optimisation flags that an `OptLevel` switches on. An unknown
  level switches nothing on.
- `ppcnn.utility`: file and string helpers. These are `file_exist`,
  `dir_exist`, `file_size`, `remove_file`, `basename`, `isdigit`,
  `getenv`, `split`, `gen_uuid`, `trim_string`, `get_filelist`,
  `get_filename`, `get_dirname` and `get_extname`, along with the
  `FileError` exception.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Examples

Reading a configuration file:

```python
from ppcnn.config import Config, config_get_value

config = Config()
config.load_from_file("server.conf")
port = config_get_value(config, "port", int)
```

Loading test images:

```python
from ppcnn.datasets import load_mnist_test_images, load_mnist_test_labels

images = load_mnist_test_images("datasets/mnist", 100)
labels = load_mnist_test_labels("datasets/mnist", 100)
```

Encoding a query record:

```python
from ppcnn.params import ComputationParams, C2SQueryParam

params = ComputationParams(28, 28, 1, 10, "mnist", "model.h5", 0, 0)
query = C2SQueryParam(params, 1024, 7)
text = query.dumps()
assert C2SQueryParam.loads(text) == query
```

Saving plain values:

```python
from ppcnn.data import PlainData

values = PlainData("d")
values.push(1.5)
values.push(-2.0)
values.save_to_file("values.bin")
```

## What this package does not do

The package does not encrypt, decrypt or hold ciphertexts. It does not
send or receive packets, and it has no client or server program. It does
not run CNN layers or load models. The parameter records, control codes
and option flags describe that work; the work itself lies outside this
package.

## Tests

```
pytest
```
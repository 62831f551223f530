# cryptolab

A small toolbox for experimenting with symmetric ciphers. It provides:

- repeating-key XOR, one-time XOR masks and a CBC mode built on XOR with 256-byte blocks;
- a three-stage attack on repeating-key XOR. The first stage finds the admissible key characters, the second analyses letter frequencies and the third scores keys against a dictionary;
- helpers for working directories, a timestamped session journal and a configuration file of paths.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Breaking repeating-key XOR

The attack has three commands. Each one reads the files written by the one before it in the current directory.

```
break-code1 <plaintext_file> <key>
break-code2 <francais|anglais>
break-code3 <dictionary_file> <cipher_file> <candidate_keys_file>
```

1. `break-code1` reads the first line of the plaintext file, up to 1023 bytes, and encrypts it with the key. It prints the cipher in hexadecimal and writes it to `message_crypte.txt`. For every key position it then lists the alphanumeric characters that decrypt the cipher only to alphanumeric, whitespace or punctuation bytes. Every combination of those characters is written to `clefs_candidates_c1.txt`, one key per line.
2. `break-code2` reads `message_crypte.txt` and decrypts its contents with each key in `clefs_candidates_c1.txt`. It measures the Euclidean distance between the letter frequencies of each result and those of French or English. The candidates are copied to `clefs_candidates_c2.txt` and the closest key is printed. If there is no key, a note saying so is added to that file.
3. `break-code3` decrypts the cipher file with each key from the candidate file, writing each result to `message.txt`. For each key it counts how many of the first hundred words, in lower case, appear as lines of the dictionary. It then prints `Key: <key>, Score: <score>` lines from the highest score to the lowest. Keys with equal scores keep the order they were read in.

Each command prints a usage message and exits with status 1 when its arguments are wrong or a file cannot be read.

## Library use

### `cryptolab.sym_crypt`

- `gen_key(length)`: a random alphanumeric key.
- `xor_message(message, key)`: XOR up to the first zero byte with the repeated key.
- `xor_length(message, key)`: XOR every byte with the key, cycled together with its terminating zero byte.
- `xor_files(key_path, input_path, output_path)`: the same XOR applied to files.
- `mask_xor_crypt(message, mask_path)` / `mask_xor_uncrypt(message, mask_path)`: one-time mask encryption and decryption. The mask is stored in `mask_path`, which defaults to `src/Partie1/mask.txt`.
- `mask_xor_crypt_files(...)` / `mask_xor_uncrypt_files(...)`: the file versions of the mask functions. A key or mask shorter than the message is refused.
- `cbc_crypt(message_path, init_vector, encrypted_path, mask_path, key_path)` / `cbc_uncrypt(...)`: CBC encryption and decryption in 256-byte blocks. The last block is padded with spaces. Block keys are random unless they are read from `key_path`, and they are stored in `mask_path`.
- `save_mask`, `fetch_mask`: store and read a mask.

Failures raise `SymCryptError`.

### `cryptolab.sym_config`

`set_config(key_path, input_path, output_path, config_path)` writes `KEY_PATH`, `INPUT_PATH` and `OUTPUT_PATH` lines. `get_config(config_path)` reads them back as a `SymConfig`. The default file is `src/Partie1/config.txt`.

### `cryptolab.key_candidates`

This module provides the following:

- `is_valid_char`
- `admissible_key_chars`
- `cartesian_keys`
- `xor_cycle`
- `xor_file`
- `search_in_dictionary`
- `text_to_words`
- `read_keys`

### `cryptolab.break_code1`, `cryptolab.break_code2`, `cryptolab.break_code3`

These modules hold the functions behind the commands. They are `break_code1`, then `letter_frequencies`, `decrypt_xor`, `frequency_distance` and `best_key`, then `score_keys`.

### `cryptolab.ranking`

`RankedKeys` keeps `ScoredKey` entries sorted by descending score. Keys longer than 49 characters are cut to 49.

### `cryptolab.files`

- `file_dir`, `create_file` and `open_file_read` place files by `FileType`. `TMP` and `OUTPUT` files go in `tmp/`, and `LOG` files go in `logs/`.
- `Journal` writes timestamped messages to a log stream and can echo them to the terminal.

## What this package does not do

- There is no interactive shell and no store of generated keys.
- There is no Diffie-Hellman parameter or key generation.
- There is no command-line front end for the symmetric ciphers. Use the functions of `cryptolab.sym_crypt` from Python.